"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file seen by rust-analyzer as a crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """Contents of a rust-project.json file."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready structure of the project file."""
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [asdict(crate) for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_text(
            json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False),
            encoding="utf-8",
        )

    def add_path(self, path: str | os.PathLike) -> None:
        """Add a crate for the path if it is a .rs file."""
        path = Path(path)
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | os.PathLike = "./exercises") -> None:
        """Add a crate for every .rs file below the exercises directory."""
        for path in sorted(Path(root).glob("**/*")):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        completed = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = completed.stdout.decode("utf-8", errors="replace")
        parts = output.split()
        toolchain = parts[0] if parts else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))