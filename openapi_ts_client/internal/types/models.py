from typing import Optional, Union

from pydantic import BaseModel


class CodeBlock(BaseModel):
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "  ")


class CodeFile(BaseModel):
    """Генерируемый TypeScript файл: шапка, импорты и блоки кода"""

    file_name: str

    header: Optional[str] = None
    imports: list[str] = []
    code_blocks: list["CodeBlock"] = []

    def __str__(self):
        return (
            "\n\n".join(
                filter(
                    bool,
                    [
                        self.header or "",
                        ("\n".join(self.imports) if self.imports else ""),
                        "\n\n".join(map(str, self.code_blocks)),
                    ],
                )
            )
            + "\n"
        )

    def add_code_block(self, code_block: Union["CodeBlock", str]) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: list[CodeFile] = []

    def add_file(self, file_name: Union["CodeFile", str], **kwargs) -> "CodeFile":
        if isinstance(file_name, str):
            code_file = CodeFile(file_name=file_name, **kwargs)
        else:
            code_file = file_name

        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None
