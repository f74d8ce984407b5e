"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import glob
import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Crate:
    """One exercise file seen by rust-analyzer as its own crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict[str, Any]:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """Contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike[str] = "./rust-project.json") -> None:
        """Write the project as compact JSON."""
        text = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_bytes(text.encode("utf-8"))

    def add_path(self, path: str | os.PathLike[str]) -> None:
        """Add a crate for the path when it has the .rs extension."""
        if Path(path).suffix == ".rs":
            self.crates.append(Crate(root_module=os.fspath(path)))

    def exercises_to_json(self, root: str | os.PathLike[str] = "./exercises") -> None:
        """Add a crate for every .rs file below the exercises directory."""
        pattern = os.path.join(os.fspath(root), "**", "*")
        for path in sorted(glob.glob(pattern, recursive=True, include_hidden=True)):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        output = (result.stdout or b"").decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))