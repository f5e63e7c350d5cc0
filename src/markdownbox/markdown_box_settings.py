from dataclasses import dataclass
import json
import os


@dataclass
class MarkdownBoxSettings:
    """
    Settings for the markdown viewer.

    This class handles the loading and saving of settings to a JSON file.
    """
    log_level: str = "INFO"
    log_directory: str = "~/.markdownbox/logs"
    max_log_files: int = 50
    window_width: int = 800
    window_height: int = 600
    open_links_externally: bool = True

    @classmethod
    def load(cls, path: str) -> "MarkdownBoxSettings":
        """Load settings from a JSON file.  A missing file gives the defaults."""
        if not os.path.exists(path):
            return cls()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            logging_section = data.get("logging", {})
            window = data.get("window", {})
            links = data.get("links", {})

            return cls(
                log_level=str(logging_section.get("level", "INFO")).upper(),
                log_directory=logging_section.get("directory", "~/.markdownbox/logs"),
                max_log_files=int(logging_section.get("maxFiles", 50)),
                window_width=int(window.get("width", 800)),
                window_height=int(window.get("height", 600)),
                open_links_externally=bool(links.get("openExternally", True))
            )

    def save(self, path: str) -> None:
        """Save settings to a JSON file."""
        data = {
            "logging": {
                "level": self.log_level,
                "directory": self.log_directory,
                "maxFiles": self.max_log_files,
            },
            "window": {
                "width": self.window_width,
                "height": self.window_height,
            },
            "links": {
                "openExternally": self.open_links_externally,
            },
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
