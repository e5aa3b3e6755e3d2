"""Check the immediate fields of an ActionResult."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field

# Cache keys are lower case hex SHA-256 sums.
HASH_KEY_PATTERN = re.compile(r"[a-f0-9]{64}")

ERR_NIL_ACTION_RESULT = "nil *ActionResult"
ERR_NEGATIVE_DIGEST = "Digest has negative SizeBytes"
ERR_NIL_OUTPUT_FILE = "nil output file"
ERR_EMPTY_PATH = "empty path"
ERR_NIL_OUTPUT_DIR = "nil output directory"
ERR_NIL_OUTPUT_FILE_SYMLINK = "nil *OutputSymlink in OutputFileSymlinks"
ERR_EMPTY_OUTPUT_FILE_SYMLINKS_PATH = "empty path in OutputFileSymlinks"
ERR_EMPTY_OUTPUT_FILE_SYMLINKS_TARGET = "empty target in OutputFileSymlinks"
ERR_NIL_OUTPUT_SYMLINK = "nil *OutputSymlink in OuputSymlinks"
ERR_EMPTY_OUTPUT_SYMLINKS_PATH = "empty path in OutputSymlinks"
ERR_EMPTY_OUTPUT_SYMLINKS_TARGET = "empty target in OutputSymlinks"
ERR_NIL_OUTPUT_DIR_SYMLINK = "nil *OutputSymlink in OutputDirectorySymlinks"
ERR_EMPTY_OUTPUT_DIR_SYMLINKS_PATH = "empty path in OutputDirectorySymlinks"
ERR_EMPTY_OUTPUT_DIR_SYMLINKS_TARGET = "empty target in OutputDirectorySymlinks"


class ValidationError(ValueError):
    """Raised when an ActionResult is malformed."""


@dataclass
class Digest:
    hash: str = ""
    size_bytes: int = 0


@dataclass
class OutputFile:
    path: str = ""
    digest: Digest | None = None
    is_executable: bool = False


@dataclass
class OutputDirectory:
    path: str = ""
    tree_digest: Digest | None = None


@dataclass
class OutputSymlink:
    path: str = ""
    target: str = ""


@dataclass
class ActionResult:
    output_files: list[OutputFile | None] = field(default_factory=list)
    output_directories: list[OutputDirectory | None] = field(default_factory=list)
    output_file_symlinks: list[OutputSymlink | None] = field(default_factory=list)
    output_symlinks: list[OutputSymlink | None] = field(default_factory=list)
    output_directory_symlinks: list[OutputSymlink | None] = field(default_factory=list)
    exit_code: int = 0
    stdout_digest: Digest | None = None
    stderr_digest: Digest | None = None


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def is_valid_hash(hash: str) -> bool:
    """Return whether ``hash`` is a lower case hex SHA-256 sum."""
    return HASH_KEY_PATTERN.fullmatch(hash) is not None


def _check_digest(digest: Digest | None) -> None:
    if digest is None:
        return
    if digest.size_bytes < 0:
        raise ValidationError(ERR_NEGATIVE_DIGEST)
    if not is_valid_hash(digest.hash):
        raise ValidationError(f"Invalid hash: {_quote(digest.hash)}")


def _check_symlinks(
    symlinks: list[OutputSymlink | None],
    nil_error: str,
    empty_path_error: str,
    empty_target_error: str,
    description: str,
) -> None:
    for link in symlinks:
        if link is None:
            raise ValidationError(nil_error)
        if link.path == "":
            raise ValidationError(empty_path_error)
        if link.target == "":
            raise ValidationError(empty_target_error)
        if link.path.startswith("/"):
            raise ValidationError(f"absolute path in {description}: {_quote(link.path)}")


def validate_action_result(action_result: ActionResult | None) -> ActionResult:
    """Validate the fields of ``action_result`` and return it unchanged.

    Referenced blobs are not checked for existence. Raises
    ``ValidationError`` describing the first problem found.
    """
    if action_result is None:
        raise ValidationError(ERR_NIL_ACTION_RESULT)

    for output_file in action_result.output_files:
        if output_file is None:
            raise ValidationError(ERR_NIL_OUTPUT_FILE)
        if output_file.path == "":
            raise ValidationError(ERR_EMPTY_PATH)
        if output_file.path.startswith("/"):
            raise ValidationError(f"absolute path in output file: {_quote(output_file.path)}")
        if output_file.digest is None:
            raise ValidationError(f"nil Digest for path {_quote(output_file.path)}")
        try:
            _check_digest(output_file.digest)
        except ValidationError as err:
            raise ValidationError(
                f"invalid Digest for path {_quote(output_file.path)}: {err}"
            ) from err

    for directory in action_result.output_directories:
        if directory is None:
            raise ValidationError(ERR_NIL_OUTPUT_DIR)
        if directory.path.startswith("/"):
            raise ValidationError(
                f"absolute path in output directory: {_quote(directory.path)}"
            )
        if directory.tree_digest is None:
            raise ValidationError(
                f"nil tree digest pointer for output directory: {_quote(directory.path)}"
            )
        try:
            _check_digest(directory.tree_digest)
        except ValidationError as err:
            raise ValidationError(
                f"Invalid TreeDigest for path {_quote(directory.path)}: {err}"
            ) from err

    _check_symlinks(
        action_result.output_file_symlinks,
        ERR_NIL_OUTPUT_FILE_SYMLINK,
        ERR_EMPTY_OUTPUT_FILE_SYMLINKS_PATH,
        ERR_EMPTY_OUTPUT_FILE_SYMLINKS_TARGET,
        "output file symlink",
    )
    _check_symlinks(
        action_result.output_symlinks,
        ERR_NIL_OUTPUT_SYMLINK,
        ERR_EMPTY_OUTPUT_SYMLINKS_PATH,
        ERR_EMPTY_OUTPUT_SYMLINKS_TARGET,
        "output symlink",
    )
    _check_symlinks(
        action_result.output_directory_symlinks,
        ERR_NIL_OUTPUT_DIR_SYMLINK,
        ERR_EMPTY_OUTPUT_DIR_SYMLINKS_PATH,
        ERR_EMPTY_OUTPUT_DIR_SYMLINKS_TARGET,
        "output directory symlink",
    )

    for name, digest in (
        ("StdoutDigest", action_result.stdout_digest),
        ("StderrDigest", action_result.stderr_digest),
    ):
        try:
            _check_digest(digest)
        except ValidationError as err:
            raise ValidationError(f"invalid {name}: {err}") from err

    return action_result