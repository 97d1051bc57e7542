from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    render_engine: str = "pymupdf"
    render_scale: float = 2.0
    screenshot_crop_ratio: float = 0.25

    context_chars: int = 80

    encrypt_engine: str = "qpdf"
    qpdf_path: str = "qpdf"
    output_suffix: str = "_protected"
