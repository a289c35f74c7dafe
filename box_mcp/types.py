"""
Box MCP Type Definitions

TypedDict definitions for the outbound Box request bodies and for every
tool's success payload.
"""

from typing import Any, Dict, List, Literal, NotRequired, Optional, TypedDict, Union


SubjectType = Literal["user", "enterprise"]
ExtractFormat = Literal["json", "xml", "text"]
FieldType = Literal["string", "number", "date", "boolean"]
TokenSource = Literal["stored_in_memory", "environment_variable", "none"]


# =============================================================================
# Box request bodies
# =============================================================================

class FileReference(TypedDict):
    """A file item reference as Box AI expects it."""
    id: str


class TemplateReference(TypedDict):
    """A metadata template reference."""
    id: str


class FieldDefinition(TypedDict):
    """One field for structured extraction."""
    name: str
    description: str
    type: FieldType


class ExtractRequest(TypedDict):
    """Body of POST /ai/extract."""
    file: FileReference
    prompt: str
    format: ExtractFormat


class ExtractStructuredRequest(TypedDict):
    """Body of POST /ai/extract_structured."""
    file: FileReference
    template: NotRequired[TemplateReference]
    fields: NotRequired[List[FieldDefinition]]


class TokenResponse(TypedDict):
    """Body returned by the Box token endpoint."""
    access_token: str
    expires_in: NotRequired[int]
    token_type: NotRequired[str]
    restricted_to: NotRequired[List[Any]]
    issued_token_type: NotRequired[str]


# =============================================================================
# Tool payloads
# =============================================================================

class AuthenticateResponse(TypedDict):
    """Response from box_authenticate."""
    success: bool
    message: str
    tokenType: Optional[str]
    expiresIn: Optional[int]
    expiresAt: Optional[str]
    restrictedTo: Optional[List[Any]]
    issuedTokenType: Optional[str]


class SetAccessTokenResponse(TypedDict):
    """Response from box_set_access_token."""
    success: bool
    message: str
    expiresAt: str


class AuthStatusResponse(TypedDict):
    """Response from box_get_auth_status."""
    authenticated: bool
    tokenSource: TokenSource
    expiresAt: Optional[str]
    isExpired: Optional[bool]
    timeUntilExpiry: Optional[int]


class FileInfoResponse(TypedDict):
    """Response from box_get_file_info."""
    id: Optional[str]
    name: Optional[str]
    size: Optional[int]
    type: Optional[str]
    createdAt: Optional[str]
    modifiedAt: Optional[str]
    description: Optional[str]
    parent: Optional[Dict[str, Any]]
    path: Optional[Dict[str, Any]]
    sharedLink: Optional[Dict[str, Any]]


# Box AI responses are passed through untouched
ExtractResponse = Union[Dict[str, Any], List[Any]]
