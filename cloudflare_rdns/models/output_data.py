"""Structured result rendered at the end of every run."""

import json
from dataclasses import dataclass
from typing import Any, Dict


OUTPUT_FORMATS = ("json", "markdown")


@dataclass
class OutputData:
    """Result object printed by the CLI.

    Attributes:
        success: Whether the operation succeeded.
        message: Optional human-readable message.
        data: Optional free-form payload, commonly {"details": "..."}.
    """

    success: bool
    message: str = ""
    data: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dict, omitting an empty message and absent data.

        Returns:
            Dict[str, Any]: JSON-compatible dictionary.
        """
        result: Dict[str, Any] = {"success": self.success}
        if self.message:
            result["message"] = self.message
        if self.data is not None:
            result["data"] = self.data
        return result

    def to_json(self) -> str:
        """Render as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"), default=str)

    def to_markdown(self) -> str:
        """Render as a small Markdown document.

        Example:
            ### Output

            **Success:** `true`

            **Message:** RDNS created for 192.0.2.1

            #### Data
            ```json
            {
              "details": "host.example.com"
            }
            ```
        """
        lines = ["### Output", ""]
        lines.append(f"**Success:** `{json.dumps(self.success)}`")
        lines.append("")
        if self.message:
            lines.append(f"**Message:** {self.message}")
            lines.append("")
        if self.data is not None:
            lines.append("#### Data")
            lines.append("```json")
            lines.append(json.dumps(self.data, indent=2, default=str))
            lines.append("```")
        return "\n".join(lines) + "\n"

    def render(self, output_format: str) -> str:
        """Render in the given format.

        Args:
            output_format: "json" or "markdown".

        Raises:
            ValueError: If the format is not supported.
        """
        if output_format == "json":
            return self.to_json()
        if output_format == "markdown":
            return self.to_markdown()
        raise ValueError(f"Unsupported output format: {output_format}")


def details(success: bool, message: str, detail: Any) -> OutputData:
    """Build a result carrying the usual {"details": ...} payload."""
    return OutputData(success=success, message=message, data={"details": detail})
