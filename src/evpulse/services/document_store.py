"""In-memory document source used by the CLI and the dashboard."""

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

from ..core.config import settings
from ..core.models import Document

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class DocumentStore:
    """
    Stores uploaded documents for the lifetime of the process.

    Mirrors the document backend the dashboard talks to: fetch all
    documents, upload one or many, delete by id. Ids are sequential
    integers starting at 0 and timestamps are nanoseconds since the epoch.
    """

    def __init__(self, default_author: str = "anonymous"):
        self.default_author = default_author
        self._documents: Dict[int, Document] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._documents)

    def get_all_documents(self) -> List[Document]:
        """Snapshot of all documents in upload order."""
        return list(self._documents.values())

    def get_document(self, document_id: int) -> Optional[Document]:
        return self._documents.get(document_id)

    def upload_document(self, content: str, author: Optional[str] = None) -> int:
        """Store ``content`` and return the new document id."""
        document = Document(
            id=self._next_id,
            content=content,
            author=author or self.default_author,
            timestamp=time.time_ns(),
        )
        self._documents[document.id] = document
        self._next_id += 1
        logger.debug(f"Uploaded document {document.id} ({len(content)} chars)")
        return document.id

    def upload_batch(
        self,
        contents: Iterable[str],
        author: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None,
        chunk_size: Optional[int] = None,
    ) -> List[int]:
        """
        Upload many documents in chunks.

        ``progress_callback(done, total)`` is called after every chunk.
        """
        items = list(contents)
        chunk_size = max(1, chunk_size or settings.upload_chunk_size)
        ids: List[int] = []

        for start in range(0, len(items), chunk_size):
            for content in items[start:start + chunk_size]:
                ids.append(self.upload_document(content, author))
            if progress_callback:
                progress_callback(len(ids), len(items))

        logger.info(f"Uploaded batch of {len(ids)} documents")
        return ids

    def delete_document(self, document_id: int) -> bool:
        """Delete a document; returns False when the id is unknown."""
        if self._documents.pop(document_id, None) is None:
            logger.warning(f"Delete requested for unknown document {document_id}")
            return False
        logger.info(f"Deleted document {document_id}")
        return True

    def clear(self) -> None:
        self._documents.clear()
