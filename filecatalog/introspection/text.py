from filecatalog.introspection.models import TextStats


class TextStatsAnalyzer:
    """Character and word counts for text content decoded as UTF-8."""

    def analyze(self, data: bytes) -> TextStats:
        text = data.decode("utf-8", errors="replace")
        return TextStats(text_length=len(text), word_count=len(text.split()))
