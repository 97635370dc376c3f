"""Generation of a rust-project.json file for rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping for this crate."""
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping for the project."""
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project as compact JSON."""
        Path(path).write_text(
            json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False),
            encoding="utf-8",
        )

    def add_path(self, path: str) -> None:
        """Add a crate for the path if its extension after the first dot is 'rs'."""
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every Rust file under the exercises folder."""
        for entry in sorted(Path(root).glob("**/*")):
            self.add_path(str(entry))

    def get_sysroot_src(self) -> None:
        """Ask rustc for the default toolchain and derive the library sources path."""
        output = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True
        ).stdout.decode("utf-8", errors="replace")
        parts = output.split()
        toolchain = parts[0] if parts else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )