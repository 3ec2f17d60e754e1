from __future__ import annotations

from tclobj_parser import ParserConfig, IncompleteInputError, parse_tcl

# output of `dict create` in tclsh
print(parse_tcl("a 4711 b xyz c {This is a Test.} d {}", ["dict", "string"]))

# a list of records, e.g. from `lmap`
rows = "{name {Oliver Wood} age 17 role Keeper} {name {Harry Potter} age 14 role Seeker}"
for row in parse_tcl(rows, ["list", "dict", "string"]):
    print(row)

# truncated output yields a partial result unless strict mode is on
print(parse_tcl("a 1 b {2 3", ["dict", "string"]))
try:
    parse_tcl("a 1 b {2 3", ["dict", "string"], ParserConfig(strict=True))
except IncompleteInputError as e:
    print(f"strict: {e}")
