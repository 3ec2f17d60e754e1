from __future__ import annotations

from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel

from tclobj_parser import TclOutputParser


class Character(BaseModel):
    name: str
    house: str
    year: int


parser = TclOutputParser(shape=["dict", "string"], model=Character)
llm = FakeListChatModel(responses=["```tcl\nname {Harry Potter} house Gryffindor year 1\n```"])

prompt = ChatPromptTemplate.from_messages([
    ("human", "Describe {input}\n\n{format_instructions}")
])

chain = prompt | llm | parser
result = chain.invoke({
    "input": "the main character of the first book",
    "format_instructions": parser.get_format_instructions(),
})
print(result)
