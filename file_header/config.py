from pydantic_settings import BaseSettings

DEFAULT_TEMPLATE = '/*\\n * Автор: ${author}\\n * Группа: ${group}\\n * Дата: ${date}\\n */\\n\\n'


class HeaderSettings(BaseSettings):
    # fileHeader.* namespace
    author: str = 'ФИО'
    group: str = 'Группа'
    # Literal "\n" sequences mark line breaks
    template: str = DEFAULT_TEMPLATE

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "FILE_HEADER_"


def load_settings() -> HeaderSettings:
    """Read the header configuration fresh for one command invocation."""
    return HeaderSettings()
