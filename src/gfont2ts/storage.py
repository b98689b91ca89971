"""Writing of generated artifacts.

Artifacts are staged as temporary files in the output directory and renamed
into place only once every one of them has been written, so a failure while
writing leaves the existing outputs untouched. Should a rename itself fail,
the files renamed before it stay replaced and the remaining temporary files
are removed.
"""

import logging
import os
import tempfile
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class FileSystemStorage:
    """Output directory on the local file system."""

    def __init__(self, path: str) -> None:
        self.basedir = path or "."

    def _ensure_dir(self) -> None:
        if not os.path.isdir(self.basedir):
            logger.debug(f"Creating {self.basedir}")
            os.makedirs(self.basedir, exist_ok=True)

    def path(self, filename: str) -> str:
        return os.path.join(self.basedir, filename)

    def _stage(self, filename: str, content: str) -> str:
        fd, temp_path = tempfile.mkstemp(
            prefix=f".{filename}.", suffix=".tmp", dir=self.basedir
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            # mkstemp creates owner-only files.
            os.chmod(temp_path, 0o644)
        except BaseException:
            os.unlink(temp_path)
            raise
        return temp_path

    def put_all(self, files: Mapping[str, str]) -> list[str]:
        """Write every file, replacing existing ones together.

        Args:
            files: Mapping of file name (relative to the directory) to text.

        Returns:
            Paths of the written files, in the order given.

        Raises:
            OSError: If a file cannot be written or renamed. Temporary files
                are removed. A write failure leaves every existing output
                untouched.
        """
        self._ensure_dir()
        staged: list[tuple[str, str]] = []
        try:
            for filename, content in files.items():
                staged.append((self._stage(filename, content), self.path(filename)))
        except BaseException:
            for temp_path, _ in staged:
                os.unlink(temp_path)
            raise

        written: list[str] = []
        try:
            for temp_path, path in staged:
                os.replace(temp_path, path)
                logger.info(f"Wrote {path}")
                written.append(path)
        except BaseException:
            for temp_path, _ in staged[len(written) :]:
                os.unlink(temp_path)
            raise
        return written


def write_outputs(output_dir: str, files: Mapping[str, str]) -> list[str]:
    """Write generated files into ``output_dir``.

    See :meth:`FileSystemStorage.put_all`.
    """
    return FileSystemStorage(output_dir).put_all(files)
