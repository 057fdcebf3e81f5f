"""Typer command definitions for the CLI entrypoint."""

from __future__ import annotations

import asyncio
import json
import mimetypes
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console

from docanalyzer.analysis.assembler import ReportAssembler
from docanalyzer.analysis.classifier import classify
from docanalyzer.analysis.serializer import ReportSerializer
from docanalyzer.config.settings import Settings
from docanalyzer.database.models import AnalysisRecord, DocumentRecord
from docanalyzer.database.repositories.memory_store import MemoryStore
from docanalyzer.database.schemas import NewUser
from docanalyzer.logging.logger import Log
from docanalyzer.uploads.exceptions import UploadError
from docanalyzer.uploads.models import UploadedFile, UploadOutcome
from docanalyzer.uploads.service import build_upload_service


def document_to_dict(document: DocumentRecord) -> dict[str, Any]:
    data = asdict(document)
    data["uploaded_at"] = document.uploaded_at.isoformat()
    return data


def analysis_to_dict(analysis: AnalysisRecord) -> dict[str, Any]:
    data = asdict(analysis)
    data["created_at"] = analysis.created_at.isoformat()
    if analysis.analysis_data:
        data["analysis_data"] = json.loads(analysis.analysis_data)
    return data


async def _upload_file(
    settings: Settings,
    username: str,
    upload: UploadedFile,
    document_type: str | None = None,
) -> UploadOutcome:
    store = MemoryStore()
    user = await store.create_user(NewUser(username=username))
    service = build_upload_service(settings, store)
    return await service.upload(user.id, upload, document_type=document_type)


def register_cli_commands(
    app: typer.Typer,
    *,
    console: Optional[Console] = None,
) -> None:
    """Attach CLI commands to the provided Typer application."""

    cli_console = console or Console()

    @app.command(help="Upload a local file and run the compliance analysis.")
    def analyze(
        file_path: Path = typer.Argument(
            ..., exists=True, dir_okay=False, readable=True, help="Document to analyse."
        ),
        mime_type: Optional[str] = typer.Option(
            None, "--mime-type", help="Override the MIME type guessed from the file name."
        ),
        document_type: Optional[str] = typer.Option(
            None,
            "--document-type",
            "-t",
            help="Declared document type; guessed from the file name when omitted.",
        ),
        username: str = typer.Option("local", "--user", help="Owner of the upload."),
    ) -> None:
        settings = Settings()
        Log.configure(settings.log_level, stream=sys.stderr)

        guessed, _ = mimetypes.guess_type(file_path.name)
        upload = UploadedFile(
            file_name=file_path.name,
            mime_type=mime_type or guessed or "application/octet-stream",
            content=file_path.read_bytes(),
        )
        try:
            outcome = asyncio.run(
                _upload_file(settings, username, upload, document_type=document_type)
            )
        except UploadError as exc:
            cli_console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=1) from exc

        cli_console.print_json(
            data={
                "document": document_to_dict(outcome.document),
                "analysis": analysis_to_dict(outcome.analysis),
            }
        )

    @app.command(name="classify", help="Classify raw text and print the assembled report.")
    def classify_text(
        text: str = typer.Argument(..., help="Source text to classify."),
        declared_type: Optional[str] = typer.Option(
            None, "--declared-type", "-t", help="Document type declared by the uploader."
        ),
    ) -> None:
        report = ReportAssembler().assemble(classify(declared_type, text))
        cli_console.print_json(data=ReportSerializer().to_payload(report))
