"""Contract tests for the JSON result object.

Validates that rendered results conform to contracts/output-schema.json.
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError, validate

from cloudflare_rdns.models.output_data import OutputData, details


def load_schema():
    """Load the JSON schema for result validation."""
    schema_path = Path(__file__).parent.parent.parent / "contracts" / "output-schema.json"
    with open(schema_path) as f:
        return json.load(f)


@pytest.mark.parametrize(
    "output",
    [
        OutputData(success=True),
        OutputData(success=True, message="No PTR record found for IP"),
        details(True, "RDNS created for 192.0.2.1", "host.example.com"),
        details(False, "Error to get rDNS Zone", "No SOA record found for 1.2.0.192.in-addr.arpa"),
        OutputData(success=True, message="API credentials are valid", data={"id": "u1", "email": "a@b.c"}),
    ],
)
def test_results_conform_to_schema(output):
    """Every result shape the CLI prints passes schema validation."""
    validate(instance=json.loads(output.to_json()), schema=load_schema())


def test_schema_rejects_missing_success():
    """The schema requires the success flag."""
    with pytest.raises(ValidationError):
        validate(instance={"message": "hello"}, schema=load_schema())


def test_schema_rejects_empty_message():
    """Empty messages are omitted rather than rendered."""
    with pytest.raises(ValidationError):
        validate(instance={"success": True, "message": ""}, schema=load_schema())
