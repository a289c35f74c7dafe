"""
Box AI Extraction Tools Module

Freeform and structured metadata extraction through Box AI.
"""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from box_mcp.box.client import BoxClient
from box_mcp.mcp.envelope import run_tool
from box_mcp.types import (
    ExtractFormat,
    ExtractRequest,
    ExtractResponse,
    ExtractStructuredRequest,
    FieldDefinition,
    FieldType,
)
from box_mcp.utils.logger import get_logger

logger = get_logger(__name__)


class ExtractField(BaseModel):
    """A field definition supplied to structured extraction."""
    name: str = Field(description="Field name")
    description: str = Field(description="Description of what to extract")
    type: Optional[FieldType] = Field(default=None, description="Expected data type")

    def to_definition(self) -> FieldDefinition:
        return {
            "name": self.name,
            "description": self.description,
            "type": self.type or "string",
        }


def build_extract_request(file_id: str, prompt: str, format: ExtractFormat = "json") -> ExtractRequest:
    return {
        "file": {"id": file_id},
        "prompt": prompt,
        "format": format,
    }


def build_extract_structured_request(
    file_id: str,
    fields: Optional[List[ExtractField]] = None,
    template_id: Optional[str] = None,
) -> ExtractStructuredRequest:
    """
    Build the body for POST /ai/extract_structured.

    A template reference takes precedence: when ``template_id`` is set the
    field definitions are not sent.
    """
    body: ExtractStructuredRequest = {"file": {"id": file_id}}
    if template_id:
        body["template"] = {"id": template_id}
    elif fields:
        body["fields"] = [field.to_definition() for field in fields]
    return body


def setup_ai_extract_tools(mcp: FastMCP, client: BoxClient) -> None:
    """Set up Box AI extraction tools on the FastMCP application."""

    @mcp.tool(
        name="box_extract_metadata",
        title="Extract Metadata from Box File (Freeform)",
        description=(
            "Extract metadata from a Box file using Box AI with a natural language prompt. "
            "Returns extracted metadata in JSON format."
        ),
        structured_output=False,
    )
    def box_extract_metadata(
        fileId: Annotated[str, Field(description="The Box file ID to extract metadata from")],
        prompt: Annotated[
            str,
            Field(
                description=(
                    "Natural language prompt describing what metadata to extract (e.g., "
                    "'Extract the invoice number, date, total amount, and vendor name')"
                )
            ),
        ],
        format: Annotated[ExtractFormat, Field(description="Output format for extracted metadata")] = "json",
    ) -> CallToolResult:
        def extract() -> ExtractResponse:
            logger.info(f"Running Box AI freeform extraction on file {fileId}")
            return client.post("/ai/extract", build_extract_request(fileId, prompt, format))

        return run_tool("Error extracting metadata", extract).to_envelope()

    @mcp.tool(
        name="box_extract_structured_metadata",
        title="Extract Structured Metadata from Box File",
        description=(
            "Extract structured metadata from a Box file using Box AI with a predefined "
            "metadata template or field definitions."
        ),
        structured_output=False,
    )
    def box_extract_structured_metadata(
        fileId: Annotated[str, Field(description="The Box file ID to extract metadata from")],
        fields: Annotated[
            Optional[List[ExtractField]],
            Field(description="Array of field definitions describing what metadata to extract"),
        ] = None,
        templateId: Annotated[
            Optional[str],
            Field(description="Optional metadata template ID if using a predefined template"),
        ] = None,
    ) -> CallToolResult:
        def extract() -> ExtractResponse:
            body = build_extract_structured_request(fileId, fields, templateId)
            logger.info(
                f"Running Box AI structured extraction on file {fileId} "
                f"({'template ' + templateId if templateId else 'field definitions'})"
            )
            return client.post("/ai/extract_structured", body)

        return run_tool("Error extracting structured metadata", extract).to_envelope()
