import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    app_env: str = Field(default=os.getenv("APP_ENV", "dev"))
    data_dir: str = Field(default=os.getenv("DATA_DIR", "./data"))
    docs_filename: str = Field(default=os.getenv("DOCS_FILENAME", "documents.json"))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))

    # OpenAI
    openai_api_key: str = Field(default=os.getenv("OPENAI_API_KEY", ""))
    openai_model: str = Field(default=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"))

    # Azure OpenAI (used instead of OpenAI when an endpoint is configured)
    az_endpoint: str = Field(default=os.getenv("AZURE_OPENAI_ENDPOINT", ""))
    az_api_key: str = Field(default=os.getenv("AZURE_OPENAI_API_KEY", ""))
    az_api_version: str = Field(default=os.getenv("AZURE_OPENAI_API_VERSION", "2024-06-01"))
    az_deployment: str = Field(default=os.getenv("AZURE_OPENAI_DEPLOYMENT", "gpt-35-turbo"))

    # Prompt windows
    question_text_limit: int = Field(default=int(os.getenv("QUESTION_TEXT_LIMIT", "10000")))
    answer_context_limit: int = Field(default=int(os.getenv("ANSWER_CONTEXT_LIMIT", "10000")))

    # LangSmith
    langsmith_api_key: str = Field(default=os.getenv("LANGSMITH_API_KEY", ""))
    langsmith_project: str = Field(default=os.getenv("LANGSMITH_PROJECT", "pdf-question-desk"))
    langsmith_tracing: bool = Field(default=os.getenv("LANGSMITH_TRACING", "0") == "1")

    @property
    def docs_file(self) -> str:
        return os.path.join(self.data_dir, self.docs_filename)

settings = Settings()
os.makedirs(settings.data_dir, exist_ok=True)
