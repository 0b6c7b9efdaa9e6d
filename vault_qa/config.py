"""UI configuration with environment variable loading.

Pydantic-based configuration for the landing page and its API client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_PAGE_TITLE = "5g消息AI客服"
DEFAULT_FAQ_NOTICE = "个人gpt账户demo，请节省使用！\U0001f91d"
DEFAULT_FAQ_QUESTIONS = [
    "AIM支持手机品牌有哪些？",
    "AIM运营商拦截如何解决？",
    "AIM模板制作规范有哪些？",
    "如何通过H5跳转小程序？",
    "富信基本格式规范有哪些？",
    "讲讲公司年假制度？",
    "AIM非5G消息用户如何接收消息？",
]


class UIConfig(BaseModel):
    """Configuration for the question/answer page.

    Attributes:
        api_base_url: Base URL of the external question/upload API.
        question_model: Model identifier sent with every question.
        request_timeout: Timeout in seconds for API calls.
        admin_user_type: ``userType`` query value that enables uploads.
        page_title: Heading shown at the top of the page.
        faq_notice: Notice shown above the FAQ list.
        faq_questions: Example questions shown to end users.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8100"),
        description="Base URL of the question/upload API",
    )
    question_model: str = Field(
        default_factory=lambda: os.getenv("QUESTION_MODEL", "GPT Turbo"),
        description="Model identifier sent with questions",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "120")),
        gt=0.0,
        description="Timeout in seconds for API calls",
    )
    admin_user_type: str = Field(
        default_factory=lambda: os.getenv("ADMIN_USER_TYPE", "admin"),
        description="userType query value that shows the upload dropzone",
    )
    page_title: str = Field(
        default_factory=lambda: os.getenv("PAGE_TITLE", DEFAULT_PAGE_TITLE),
    )
    faq_notice: str = DEFAULT_FAQ_NOTICE
    faq_questions: list[str] = Field(default_factory=lambda: list(DEFAULT_FAQ_QUESTIONS))

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("question_model", "admin_user_type")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only identifiers."""
        if not v or not v.strip():
            raise ValueError("value must not be empty")
        return v.strip()


def get_ui_config() -> UIConfig:
    """Create UI configuration from environment.

    Returns:
        Configured UIConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return UIConfig()
