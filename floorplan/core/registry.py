"""Encoder registry — stores and resolves document encoders by export format."""

from __future__ import annotations

from floorplan.core.errors import UnsupportedFormatError
from floorplan.encoders.base import DocumentEncoder
from floorplan.models import ExportFormat


class EncoderRegistry:
    """
    Central registry for all document encoders.

    Encoders are registered at startup, one per ExportFormat. Registering
    a second encoder for a format replaces the first.
    """

    def __init__(self) -> None:
        self._encoders: dict[ExportFormat, DocumentEncoder] = {}

    def register(self, encoder: DocumentEncoder) -> None:
        """Register a document encoder."""
        self._encoders[encoder.format] = encoder

    def unregister(self, format: ExportFormat) -> None:
        """Remove the encoder for a format."""
        self._encoders.pop(format, None)

    def get_encoder(self, format: ExportFormat | str) -> DocumentEncoder:
        """Encoder for ``format`` (enum or its string value)."""
        try:
            key = ExportFormat(format)
        except ValueError:
            raise UnsupportedFormatError(str(format)) from None
        encoder = self._encoders.get(key)
        if encoder is None:
            raise UnsupportedFormatError(key.value)
        return encoder

    def list_encoders(self) -> list[DocumentEncoder]:
        """Return all registered encoders."""
        return list(self._encoders.values())


def create_default_registry() -> EncoderRegistry:
    """Create a registry with the SVG and DXF encoders."""
    from floorplan.encoders.dxf import DxfEncoder
    from floorplan.encoders.svg import SvgEncoder

    registry = EncoderRegistry()
    registry.register(SvgEncoder())
    registry.register(DxfEncoder())
    return registry
