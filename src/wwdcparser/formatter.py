"""Implementations of content formatting components."""

import io
import logging
from typing import TextIO

from .models import MarkdownOutput, WWDCDocument, WWDCVideo

logger = logging.getLogger("wwdcparser")


class MarkdownFormatter:
    """Implementation of ContentFormatter that creates markdown files."""

    def _write_video(self, f: TextIO, video: WWDCVideo) -> None:
        """Write a WWDC session as markdown.

        Args:
            f: File handle to write to
            video: The extracted session
        """
        f.write(f"# {video.title}\n")
        f.write(f"> {video.url}\n\n")

        f.write("## Overview\n")
        f.write(f"{video.overview}\n\n")

        if video.resources:
            f.write("## Resources\n")
            for resource in video.resources:
                f.write(
                    f"- [{resource.title} ({resource.type_label})]({resource.url})\n"
                )
            f.write("\n")

        if video.code_samples:
            f.write("## Code Samples\n")
            for sample in video.code_samples:
                if sample.timestamp:
                    f.write(f"### {sample.title} ({sample.timestamp})\n")
                else:
                    f.write(f"### {sample.title}\n")
                code = sample.code.strip("\n")
                f.write(f"```{sample.language}\n")
                f.write(f"{code}\n")
                f.write("```\n\n")

        if video.transcript:
            f.write("## Transcript\n")
            f.write(f"{video.transcript}\n")

    def _write_document(self, f: TextIO, document: WWDCDocument) -> None:
        """Write a documentation page as markdown.

        Args:
            f: File handle to write to
            document: The extracted documentation page
        """
        f.write(f"# {document.title}\n\n")
        if document.description:
            f.write(f"{document.description}\n\n")

        f.write("## Overview\n")
        f.write(f"{document.overview}\n\n")

        if document.notes:
            f.write("## Notes\n")
            for note in document.notes:
                f.write(f"{note}\n\n")

        for section in document.sections:
            f.write(f"## {section.title}\n\n")
            for item in section.items:
                f.write(f"### {item.item_type} `{item.title}`\n")
                f.write(f"{item.description}\n\n")
                if item.url:
                    f.write(f"[Documentation]({item.url})\n\n")

    def render(self, content: WWDCVideo | WWDCDocument) -> MarkdownOutput:
        """Render extracted content as markdown.

        Args:
            content: The extracted page content

        Returns:
            MarkdownOutput holding the markdown text and the content title
        """
        buffer = io.StringIO()
        if isinstance(content, WWDCVideo):
            self._write_video(buffer, content)
        elif isinstance(content, WWDCDocument):
            self._write_document(buffer, content)
        else:
            raise TypeError(f"Cannot format {type(content).__name__}")

        return MarkdownOutput(content=buffer.getvalue(), title=content.title)

    def format_content(
        self, content: WWDCVideo | WWDCDocument, output_path: str
    ) -> str:
        """Format extracted content as a markdown file.

        Args:
            content: The extracted page content
            output_path: Path to save the formatted output

        Returns:
            Path to the created markdown file
        """
        output = self.render(content)

        logger.info(f"Creating markdown file at {output_path}")
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(output.content)

        return output_path
