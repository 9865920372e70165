from pydantic import BaseModel


class Definition(BaseModel):
    en: str
    cn: str


class Example(BaseModel):
    en: str
    cn: str


class Collocation(BaseModel):
    phrase: str
    cn: str


class Task(BaseModel):
    instruction: str
    demo_en: str
    demo_cn: str


class VocabContent(BaseModel):
    core_meaning: str
    ipa: str
    definitions: list[Definition]
    related_words: str | None = None
    collocations: list[Collocation] | None = None
    examples: list[Example] | None = None
    task: Task | None = None


class VocabItem(BaseModel):
    word: str
    pos: str
    level: int
    content: VocabContent

    model_config = {"frozen": True}
