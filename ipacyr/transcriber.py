"""IPA to Cyrillic transcription for a simplified Russian phonology.

Notation text is parsed into sound descriptors, reduced to the Russian
phoneme inventory and spelled in Cyrillic.
"""

import logging
import re
from collections.abc import Iterable
from functools import lru_cache
from typing import Self

from ipacyr.config import TranscriberConfig
from ipacyr.notation import parse_ipa
from ipacyr.phonemes import PhonemeSequence
from ipacyr.reducer import reduce_sounds
from ipacyr.renderer import render
from ipacyr.sounds import Sound

logger = logging.getLogger(__name__)

_SPACE_RUN = re.compile(r" {2,}")


class RussianTranscriber:
    """Transcriber from IPA notation to Russian Cyrillic.

    Errors from the notation parser (:class:`NotationError`) and from the
    reducer (:class:`UnsupportedPhonemeError`) propagate unchanged.
    """

    def __init__(self, config: TranscriberConfig | None = None) -> None:
        """Initialize transcriber.

        Args:
            config: Transcriber configuration.
        """
        self.config = config or TranscriberConfig()

    def to_phonemes(self, text: str) -> PhonemeSequence:
        """Parse IPA notation and reduce it to Russian phonemes."""
        return reduce_sounds(parse_ipa(text))

    def transcribe_sounds(self, sounds: Iterable[Sound]) -> str:
        """Transcribe already parsed sound descriptors.

        Args:
            sounds: Sound descriptors in textual order.

        Returns:
            Cyrillic text.

        Raises:
            UnsupportedPhonemeError: If a sound has no Russian counterpart.
        """
        return self._finish(render(reduce_sounds(sounds)))

    def transcribe(self, text: str) -> str:
        """Transcribe IPA notation text.

        Args:
            text: IPA notation, e.g. ``"nʲæ"``.

        Returns:
            Cyrillic text, e.g. ``"ня"``.

        Raises:
            NotationError: If the notation is malformed.
            UnsupportedPhonemeError: If a sound has no Russian counterpart.
        """
        result = self._finish(render(self.to_phonemes(text)))
        logger.debug("Transcribed %r -> %r", text, result)
        return result

    def _finish(self, text: str) -> str:
        if self.config.collapse_separators:
            text = _SPACE_RUN.sub(" ", text)
        if self.config.strip:
            text = text.strip(" ")
        return text

    @classmethod
    def from_config(cls, config_dict: dict) -> Self:
        """Create transcriber from configuration dictionary."""
        config = TranscriberConfig(**config_dict)
        return cls(config=config)


# Module-level instance for convenience
_default_transcriber: RussianTranscriber | None = None


def get_transcriber() -> RussianTranscriber:
    """Get or create the default transcriber instance."""
    global _default_transcriber
    if _default_transcriber is None:
        _default_transcriber = RussianTranscriber()
    return _default_transcriber


def ipa_to_cyrillic(text: str) -> str:
    """Convenience function to transcribe IPA notation.

    Args:
        text: IPA notation.

    Returns:
        Cyrillic text.
    """
    return get_transcriber().transcribe(text)


def sounds_to_cyrillic(sounds: Iterable[Sound]) -> str:
    """Convenience function to transcribe sound descriptors."""
    return get_transcriber().transcribe_sounds(sounds)


@lru_cache(maxsize=10000)
def cached_ipa_to_cyrillic(text: str) -> str:
    """Cached transcription for repeated texts.

    Args:
        text: IPA notation.

    Returns:
        Cyrillic text.
    """
    return ipa_to_cyrillic(text)
