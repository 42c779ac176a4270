"""
Export-related data models.
"""

from pydantic import BaseModel, Field


class ExportedFile(BaseModel):
    """A rendered summary ready to be downloaded."""
    filename: str = Field(description="Download file name")
    mimetype: str = Field(description="Media type of the content")
    content: bytes = Field(description="Rendered file content")

    @property
    def size(self) -> int:
        return len(self.content)
