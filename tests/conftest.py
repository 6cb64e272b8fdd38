"""
Shared test fixtures and configuration for entire test suite.

Provides: sample Bedrock retrieval results, settings with API keys, mocked
knowledge base client, FastAPI TestClient with dependency overrides
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from knowledge_bridge.api.deps import get_retrieval_service, get_settings_dependency
from knowledge_bridge.api.main import create_app
from knowledge_bridge.application.services import RetrievalService
from knowledge_bridge.configs import Settings
from knowledge_bridge.configs.auth import AuthSettings

API_KEY = "test-api-key"


@pytest.fixture
def api_key() -> str:
    """Accepted API key."""
    return API_KEY


@pytest.fixture
def auth_headers(api_key: str) -> dict[str, str]:
    """Authorization header carrying the accepted API key."""
    return {"Authorization": f"Bearer {api_key}"}


@pytest.fixture
def settings(api_key: str) -> Settings:
    """Settings with a single accepted API key."""
    return Settings(auth=AuthSettings(keys=api_key))


@pytest.fixture
def bedrock_results() -> list[dict]:
    """
    Bedrock retrievalResults in provider (descending score) order.

    Returns:
        list[dict]: Three results scoring 0.92, 0.61 and 0.35
    """
    return [
        {
            "content": {"text": "Refunds are issued within 14 days.", "type": "TEXT"},
            "location": {
                "type": "S3",
                "s3Location": {"uri": "s3://kb-docs/policies/refunds.pdf"},
            },
            "score": 0.92,
            "metadata": {
                "x-amz-bedrock-kb-source-uri": "s3://kb-docs/policies/refunds.pdf",
                "x-amz-bedrock-kb-chunk-id": "chunk-1",
                "category": "policy",
            },
        },
        {
            "content": {"text": "Contact support to start a return.", "type": "TEXT"},
            "location": {
                "type": "WEB",
                "webLocation": {"url": "https://example.com/support/returns"},
            },
            "score": 0.61,
            "metadata": {"category": "support"},
        },
        {
            "content": {"text": "Our office is closed on public holidays.", "type": "TEXT"},
            "location": {
                "type": "S3",
                "s3Location": {"uri": "s3://kb-docs/general/hours.md"},
            },
            "score": 0.35,
            "metadata": {},
        },
    ]


@pytest.fixture
def mock_bedrock_client(bedrock_results: list[dict]) -> MagicMock:
    """
    Create mock BedrockKnowledgeBaseClient returning the sample results.

    Returns:
        MagicMock: Client whose retrieve() returns bedrock_results
    """
    client = MagicMock()
    client.retrieve.return_value = bedrock_results
    return client


@pytest.fixture
def client(settings: Settings, mock_bedrock_client: MagicMock) -> TestClient:
    """
    Provide TestClient for the full application with AWS swapped out.

    Lifespan is not entered, so no boto3 client is built.
    """
    app = create_app()
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    app.dependency_overrides[get_retrieval_service] = lambda: RetrievalService(
        client=mock_bedrock_client
    )
    return TestClient(app)
