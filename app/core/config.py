from typing import Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="visual-study-backend", alias="APP_NAME")
    version: str = Field(default="1.0.0", alias="APP_VERSION")
    api_prefix: str = Field(default="api", alias="API_PREFIX")
    port: int = Field(default=4000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class GeminiSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    model_name: str = Field(default="gemini-2.0-flash", alias="GEMINI_MODEL")
    timeout_seconds: float = Field(default=30.0, alias="GENERATION_TIMEOUT_SECONDS")


class GenerationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    max_content_chars: int = Field(default=8000, alias="MAX_CONTENT_CHARS")
    quiz_min_content_chars: int = Field(default=50, alias="QUIZ_MIN_CONTENT_CHARS")
    flashcards_min_content_chars: int = Field(
        default=30, alias="FLASHCARDS_MIN_CONTENT_CHARS"
    )
    summary_max_document_chars: int = Field(
        default=15000, alias="SUMMARY_MAX_DOCUMENT_CHARS"
    )
    # JSON file overriding the built-in fallback table: {"quiz": [...], "flashcards": [...]}
    fallback_content_file: Optional[str] = Field(
        default=None, alias="FALLBACK_CONTENT_FILE"
    )


class TTSSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    elevenlabs_api_key: Optional[str] = Field(default=None, alias="ELEVENLABS_API_KEY")
    elevenlabs_voice_id: str = Field(
        default="pNInz6obpgDQGcFmaJgB", alias="ELEVENLABS_VOICE_ID"
    )
    elevenlabs_model_id: str = Field(
        default="eleven_monolingual_v1", alias="ELEVENLABS_MODEL_ID"
    )
    google_api_key: Optional[str] = Field(default=None, alias="GOOGLE_TTS_API_KEY")
    language_code: str = Field(default="en-US", alias="TTS_LANGUAGE_CODE")
    max_text_chars: int = Field(default=5000, alias="TTS_MAX_TEXT_CHARS")
    timeout_seconds: float = Field(default=30.0, alias="TTS_TIMEOUT_SECONDS")


class SupabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    url: Optional[str] = Field(default=None, alias="SUPABASE_URL")
    key: Optional[str] = Field(default=None, alias="SUPABASE_KEY")
    documents_table: str = Field(default="documents", alias="SUPABASE_DOCUMENTS_TABLE")
    bucket: str = Field(default="documents", alias="SUPABASE_BUCKET")
    signed_url_expiry_seconds: int = Field(
        default=60 * 60, alias="SUPABASE_SIGNED_URL_EXPIRY"
    )

    @computed_field
    def is_configured(self) -> bool:
        return bool(self.url and self.key)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    gemini: GeminiSettings = Field(default_factory=lambda: GeminiSettings())
    generation: GenerationSettings = Field(default_factory=lambda: GenerationSettings())
    tts: TTSSettings = Field(default_factory=lambda: TTSSettings())
    supabase: SupabaseSettings = Field(default_factory=lambda: SupabaseSettings())


settings = Settings()
