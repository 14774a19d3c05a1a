"""
Encoding of structured sub-documents into single text columns.

Each sub-document type gets one ``SubdocumentCodec``. The repositories call
``encode`` when writing a row and ``decode`` when reading one, so the ORM
tables only ever see JSON text and every typed detail stays in the schemas.

Three shapes are supported:

- ``document``: always stored; a NULL column decodes to a default instance.
- ``optional``: ``None`` is stored as NULL and NULL decodes back to ``None``.
- ``sequence``: an empty list is stored as NULL and NULL decodes to ``[]``.
"""

from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from robohub_inventory.exceptions import CorruptSubdocumentError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class SubdocumentCodec(Generic[T]):
    """
    Encode/decode pair for one sub-document type.

    Attributes:
        name (str): Sub-document name used in error messages
        adapter (TypeAdapter): Validator/serializer for the in-memory type
        empty (Callable): Factory for the value a NULL column decodes to
        omit_empty (bool): Store falsy values (empty lists) as NULL
    """

    def __init__(self, name: str, adapter: TypeAdapter, empty: Callable[[], T], omit_empty: bool = False):
        self.name = name
        self.adapter = adapter
        self.empty = empty
        self.omit_empty = omit_empty

    def encode(self, value: Optional[T]) -> Optional[str]:
        """
        Serialize a sub-document for storage.

        Args:
            value: In-memory sub-document

        Returns:
            Optional[str]: JSON text, or None when the value is stored as NULL
        """
        if value is None:
            return None
        if self.omit_empty and not value:
            return None
        return self.adapter.dump_json(value, by_alias=True, exclude_none=True).decode("utf-8")

    def decode(self, raw: Union[str, bytes, None]) -> T:
        """
        Rebuild a sub-document from its stored form.

        Args:
            raw: Column value as returned by the driver

        Returns:
            The decoded sub-document, or its zero value for NULL

        Raises:
            CorruptSubdocumentError: If the stored text is not a valid encoding
        """
        if raw is None:
            return self.empty()
        try:
            return self.adapter.validate_json(raw)
        except ValidationError as exc:
            raise CorruptSubdocumentError(self.name, str(exc)) from exc

    def __repr__(self):
        return f"<SubdocumentCodec {self.name}>"


def document(model: Type[M], name: Optional[str] = None) -> SubdocumentCodec[M]:
    """Codec for a sub-document that is always present."""
    return SubdocumentCodec(name or model.__name__, TypeAdapter(model), model)


def optional(model: Type[M], name: Optional[str] = None) -> SubdocumentCodec[Optional[M]]:
    """Codec for a sub-document that may be absent."""
    return SubdocumentCodec(name or model.__name__, TypeAdapter(model), lambda: None)


def sequence(model: Type[M], name: Optional[str] = None) -> SubdocumentCodec[List[M]]:
    """Codec for a list of sub-documents; empty lists are stored as NULL."""
    return SubdocumentCodec(
        name or f"{model.__name__} list",
        TypeAdapter(List[model]),
        list,
        omit_empty=True,
    )


def encode_all(codecs: Dict[str, SubdocumentCodec[Any]], values: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``values`` with every codec-managed field encoded."""
    encoded = dict(values)
    for field, codec in codecs.items():
        if field in encoded:
            encoded[field] = codec.encode(encoded[field])
    return encoded


def decode_all(codecs: Dict[str, SubdocumentCodec[Any]], values: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``values`` with every codec-managed field decoded."""
    decoded = dict(values)
    for field, codec in codecs.items():
        if field in decoded:
            decoded[field] = codec.decode(decoded[field])
    return decoded
