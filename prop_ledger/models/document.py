"""Document metadata model."""

from dataclasses import dataclass, field
from datetime import datetime

from prop_ledger.models.enums import DocumentType


@dataclass
class DocumentMeta:
    """Metadata for an uploaded document.

    Only metadata is stored; ``url`` may point at the content. Documents
    are immutable once uploaded, so there is no patch type.
    """

    id: str
    name: str
    document_type: DocumentType = field(metadata={"wire": "type"})
    upload_date: datetime
    size: int  # Bytes
    apartment_id: str | None = None  # None means a global document
    url: str | None = None
