"""
Resume document persistence.

Stores each resume as a YAML file named after its document id:

    <store_dir>/<document_id>.yaml
        document_id: "..."
        updated_at: "2026-10-19T10:15:00.123456"
        resume: {personalInfo: ..., summary: ..., ...}

Usage:
    from resumeforge.contexts.document.resume_repository import ResumeRepository

    repo = ResumeRepository()
    document_id, document = repo.load_latest()
    document.summary = "Backend engineer..."
    repo.save(document_id, document)
"""

import os
import uuid
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from resumeforge.contexts.document.exceptions import MalformedDocument
from resumeforge.contexts.document.logger import _log_debug, _log_info, _log_warning
from resumeforge.contexts.document.resume_data_structure import ResumeDocument
from resumeforge.utils.timestamp import now_exact

load_dotenv()
RESUME_STORE_PATH = Path(os.getenv("RESUME_STORE_PATH", "outs/resumes"))


def _read_yaml(path: Path):
    """Read a YAML (or JSON) file into plain containers without resolving interpolations."""
    try:
        return OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    except (OmegaConfBaseException, YAMLError) as e:
        raise MalformedDocument(f"Could not parse resume file: {e}", source=str(path)) from e


def load_resume_file(path: Path) -> ResumeDocument:
    """
    Load a resume from a YAML or JSON file.

    Accepts both bare resumes and files written by ResumeRepository.

    Raises:
        MalformedDocument: If the file cannot be parsed or lacks required structure
    """
    data = _read_yaml(path)

    # Accept repository files as well as bare resumes
    if isinstance(data, dict) and "resume" in data and "document_id" in data:
        data = data["resume"]

    try:
        return ResumeDocument.from_dict(data)
    except MalformedDocument as e:
        raise MalformedDocument(e.message, path=e.path, source=str(path)) from e


class ResumeRepository:
    """
    File-backed store of resume documents keyed by an opaque document id.

    Attributes:
        store_dir: Directory holding one YAML file per document
    """

    def __init__(self, store_dir: Path = None):
        self.store_dir = Path(store_dir) if store_dir is not None else RESUME_STORE_PATH

    def _path_for(self, document_id: str) -> Path:
        return self.store_dir / f"{document_id}.yaml"

    def list_ids(self) -> List[str]:
        """Document ids currently stored, sorted by name."""
        if not self.store_dir.exists():
            return []
        return sorted(path.stem for path in self.store_dir.glob("*.yaml"))

    def exists(self, document_id: str) -> bool:
        return self._path_for(document_id).exists()

    def load(self, document_id: str) -> ResumeDocument:
        """
        Load one document by id.

        Raises:
            FileNotFoundError: If no document with that id is stored
            MalformedDocument: If the stored file is corrupt
        """
        path = self._path_for(document_id)
        if not path.exists():
            raise FileNotFoundError(f"No resume stored with id '{document_id}' in {self.store_dir}")
        return load_resume_file(path)

    def load_latest(self) -> Tuple[str, ResumeDocument]:
        """
        Load the most recently updated document.

        Returns:
            (document_id, document). When nothing is stored, a fresh id and
            ResumeDocument.empty(); nothing is written until save() is called.
        """
        entries = []
        for document_id in self.list_ids():
            meta = _read_yaml(self._path_for(document_id))
            updated_at = meta.get("updated_at", "") if isinstance(meta, dict) else ""
            if not updated_at:
                _log_warning(f"Resume {document_id} has no updated_at, treating it as oldest")
            entries.append((str(updated_at), document_id))

        if not entries:
            document_id = uuid.uuid4().hex
            _log_info(f"No stored resume found, starting new document {document_id}")
            return document_id, ResumeDocument.empty()

        # ISO timestamps sort chronologically as strings
        _, document_id = max(entries)
        _log_debug(f"Loading most recent resume {document_id}")
        return document_id, self.load(document_id)

    def save(self, document_id: str, document: ResumeDocument) -> Path:
        """
        Upsert a document under its id and stamp it with the current time.

        Saving the same document twice leaves a single file with the same content
        (apart from updated_at).

        Returns:
            Path to the written file
        """
        self.store_dir.mkdir(parents=True, exist_ok=True)
        path = self._path_for(document_id)
        payload = {
            "document_id": document_id,
            "updated_at": now_exact(),
            "resume": document.to_dict(),
        }
        OmegaConf.save(OmegaConf.create(payload), path)
        _log_debug(f"Saved resume {document_id} to {path}")
        return path

    def delete(self, document_id: str) -> bool:
        """Delete a stored document. Returns True if a file was removed."""
        path = self._path_for(document_id)
        if not path.exists():
            return False
        path.unlink()
        return True
