from docanalyzer.config.settings import Settings
from docanalyzer.extraction.base import BaseTextExtractor
from docanalyzer.extraction.placeholder_adapter import PlaceholderTextExtractor


class TextExtractorFactory:
    """Creates the text extractor named in settings."""

    ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "placeholder": PlaceholderTextExtractor,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.text_extractor.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown text extractor '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
