"""Request handling helpers."""
from __future__ import annotations
import os
from typing import Optional
from flask import Request
from werkzeug.datastructures import FileStorage


def get_msa_content(msa_file: Optional[FileStorage]) -> Optional[bytes]:
    """Extracts raw bytes from the uploaded MSA file, if present."""
    if not msa_file or not msa_file.filename:
        return None

    msa_file.seek(0, os.SEEK_END)
    file_size = msa_file.tell()
    msa_file.seek(0)

    if file_size > 0:
        return msa_file.read()
    return None


def parse_msa_upload(request: Request) -> bytes:
    """Returns the uploaded alignment from an 'msaFile' part or the raw request body.

    Bytes are passed through undecoded so the parser can decide how to treat
    invalid UTF-8.
    """
    if "msaFile" in request.files:
        content = get_msa_content(request.files.get("msaFile"))
        if content is None:
            raise ValueError("Uploaded file 'msaFile' is empty.")
        return content

    body = request.get_data(cache=False)
    if not body:
        raise ValueError(
            "Missing alignment. Upload an 'msaFile' or send FASTA text as the request body."
        )
    return body


def parse_field_count(request: Request) -> int:
    """Reads the required 'fields' query parameter as a positive integer."""
    raw = request.args.get("fields")
    if raw is None:
        raise ValueError("Missing required query parameter 'fields'.")
    try:
        fields = int(raw)
    except ValueError:
        raise ValueError(f"Query parameter 'fields' must be an integer, got {raw!r}.")
    if fields < 1:
        raise ValueError("Query parameter 'fields' must be at least 1.")
    return fields
