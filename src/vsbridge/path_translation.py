"""Path translation between native, mounted and URI path formats.

Three address spaces are supported:

- NATIVE: drive-letter paths, e.g. ``C:\\src\\app\\main.cs``
- MOUNTED: drives exposed under a mount root, e.g. ``/mnt/c/src/app/main.cs``
- URI: file URIs, e.g. ``file:///C:/src/app/main.cs``

Every conversion pivots through NATIVE. Inputs that do not have the shape
of their declared source format pass through unchanged; only unsupported
format values fail.
"""

import logging
import ntpath
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

_NATIVE_PATTERN = re.compile(r"^([A-Za-z]):\\(.*)$", re.DOTALL)
_MOUNTED_PATTERN = re.compile(r"^/mnt/([a-z])/(.*)$", re.DOTALL)
_URI_PATTERN = re.compile(r"^file:///(.*)$", re.DOTALL)

URI_PREFIX = "file:///"

# Characters replaced with "_" when building composite ids
_ID_UNSAFE_CHARS = str.maketrans({"\\": "_", "/": "_", " ": "_", ".": "_"})


class PathFormat(Enum):
    """Path address spaces. AUTO is a request-time directive only."""

    AUTO = "auto"
    NATIVE = "native"
    MOUNTED = "mounted"
    URI = "uri"


# Legacy names used by older clients
_FORMAT_ALIASES = {
    "windows": PathFormat.NATIVE,
    "wsl": PathFormat.MOUNTED,
}


class PathTranslationError(Exception):
    """A path could not be translated."""


class InvalidPathFormatError(PathTranslationError, ValueError):
    """An unsupported or unparseable path format was requested."""


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of a translation: either a value or an error, never both."""

    value: str | None = None
    error: PathTranslationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str | None:
        """Return the value, raising the captured error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


def parse_path_format(text: str) -> PathFormat:
    """Parse a format name case-insensitively.

    Accepts ``auto``, ``native``, ``mounted`` and ``uri`` as well as the
    aliases ``windows`` and ``wsl``.

    Raises:
        InvalidPathFormatError: If the text names no known format.
    """
    key = (text or "").strip().lower()
    if key in _FORMAT_ALIASES:
        return _FORMAT_ALIASES[key]
    try:
        return PathFormat(key)
    except ValueError:
        valid = ", ".join(f.value for f in PathFormat)
        raise InvalidPathFormatError(
            f"Invalid path format: {text!r}. Valid values are: {valid}"
        ) from None


def detect_format(path: str | None) -> PathFormat:
    """Detect the format of a path from its shape.

    Empty input yields NATIVE as a safe default.
    """
    if not path:
        return PathFormat.NATIVE

    if _NATIVE_PATTERN.match(path):
        return PathFormat.NATIVE
    if _MOUNTED_PATTERN.match(path):
        return PathFormat.MOUNTED
    if _URI_PATTERN.match(path):
        return PathFormat.URI

    # No exact pattern matched, fall back to a best guess
    if "\\" in path:
        return PathFormat.NATIVE
    if path.startswith("/"):
        return PathFormat.MOUNTED
    return PathFormat.NATIVE


def mounted_to_native(path: str) -> str:
    """``/mnt/c/a/b`` -> ``C:\\a\\b``; anything else is returned unchanged."""
    match = _MOUNTED_PATTERN.match(path)
    if not match:
        return path
    drive, rest = match.groups()
    return drive.upper() + ":\\" + rest.replace("/", "\\")


def native_to_mounted(path: str) -> str:
    """``C:\\a\\b`` -> ``/mnt/c/a/b``; anything else is returned unchanged."""
    match = _NATIVE_PATTERN.match(path)
    if not match:
        return path
    drive, rest = match.groups()
    return f"/mnt/{drive.lower()}/" + rest.replace("\\", "/")


def uri_to_native(path: str) -> str:
    """``file:///C:/a/b`` -> ``C:\\a\\b``.

    URIs wrapping a mounted path (``file:///mnt/c/...``) are resolved through
    :func:`mounted_to_native`.
    """
    match = _URI_PATTERN.match(path)
    if not match:
        return path
    rest = match.group(1)
    if rest.startswith("mnt/"):
        return mounted_to_native(f"/{rest}")
    return rest.replace("/", "\\")


def native_to_uri(path: str) -> str:
    """``C:\\a\\b`` -> ``file:///C:/a/b``. Always prefixes, so not idempotent."""
    return URI_PREFIX + path.replace("\\", "/")


_TO_NATIVE = {
    PathFormat.NATIVE: lambda p: p,
    PathFormat.MOUNTED: mounted_to_native,
    PathFormat.URI: uri_to_native,
}

_FROM_NATIVE = {
    PathFormat.NATIVE: lambda p: p,
    PathFormat.MOUNTED: native_to_mounted,
    PathFormat.URI: native_to_uri,
}


def _render_relative(relative: str, target: PathFormat) -> str:
    if target is PathFormat.NATIVE:
        return relative.replace("/", "\\")
    if target is PathFormat.MOUNTED:
        return relative.replace("\\", "/")
    if target is PathFormat.URI:
        return URI_PREFIX + relative.replace("\\", "/")
    raise InvalidPathFormatError(f"Unsupported target path format: {target}")


class PathTranslator:
    """Stateless translator between path formats.

    Safe to share across concurrent requests.
    """

    def detect_format(self, path: str | None) -> PathFormat:
        return detect_format(path)

    def try_translate(
        self,
        path: str | None,
        source: PathFormat,
        target: PathFormat,
    ) -> TranslationResult:
        """Translate a path, returning failures as values instead of raising."""
        if not path:
            return TranslationResult(value=path)
        if source == target:
            return TranslationResult(value=path)

        if source is PathFormat.AUTO:
            source = detect_format(path)
            logger.debug(f"Auto-detected path format {source.value} for {path}")

        to_native = _TO_NATIVE.get(source) if isinstance(source, PathFormat) else None
        if to_native is None:
            logger.error(f"Unsupported source path format: {source}")
            return TranslationResult(
                error=InvalidPathFormatError(
                    f"Unsupported source path format: {source}"
                )
            )
        from_native = (
            _FROM_NATIVE.get(target) if isinstance(target, PathFormat) else None
        )
        if from_native is None:
            logger.error(f"Unsupported target path format: {target}")
            return TranslationResult(
                error=InvalidPathFormatError(
                    f"Unsupported target path format: {target}"
                )
            )

        try:
            native = to_native(path)
        except Exception as e:
            logger.error(f"Error converting {path} from {source.value} to native")
            error = PathTranslationError(
                f"Failed to convert path from {source.value} format: {path}"
            )
            error.__cause__ = e
            return TranslationResult(error=error)

        try:
            result = from_native(native)
        except Exception as e:
            logger.error(f"Error converting {native} from native to {target.value}")
            error = PathTranslationError(
                f"Failed to convert path to {target.value} format: {native}"
            )
            error.__cause__ = e
            return TranslationResult(error=error)

        logger.debug(
            f"Translated path from {source.value} to {target.value}: {path} -> {result}"
        )
        return TranslationResult(value=result)

    def translate(
        self,
        path: str | None,
        source: PathFormat,
        target: PathFormat,
    ) -> str | None:
        """Translate a path between formats.

        Empty input and identical formats pass through unchanged, as do
        paths whose shape does not match the source format.

        Raises:
            InvalidPathFormatError: If either format is unsupported.
            PathTranslationError: If a conversion step fails.
        """
        return self.try_translate(path, source, target).unwrap()

    def get_relative_path(
        self,
        base_path: str | None,
        full_path: str | None,
        target: PathFormat = PathFormat.NATIVE,
    ) -> str | None:
        """Compute ``full_path`` relative to the directory containing ``base_path``.

        Both inputs may be in any format. When ``full_path`` is not under the
        base directory, the full native path is returned; no ``..`` segments
        are ever produced.

        Raises:
            ValueError: If either input is empty.
            PathTranslationError: If normalizing either input fails.
        """
        if not base_path:
            raise ValueError("Base path cannot be null or empty")
        if not full_path:
            raise ValueError("Full path cannot be null or empty")

        base_format = detect_format(base_path)
        full_format = detect_format(full_path)
        logger.debug(
            f"Detected formats - base: {base_format.value}, full: {full_format.value}"
        )

        native_base = self.translate(base_path, base_format, PathFormat.NATIVE) or ""
        native_full = self.translate(full_path, full_format, PathFormat.NATIVE) or ""

        base_dir = ntpath.dirname(native_base)
        if not base_dir:
            logger.warning(f"Could not get directory name from base path: {native_base}")
            return self.translate(full_path, PathFormat.NATIVE, target)

        if native_full.lower().startswith(base_dir.lower()):
            relative = native_full[len(base_dir) :].lstrip("\\/")
        else:
            relative = native_full

        result = _render_relative(relative, target)
        logger.debug(
            f"Calculated relative path: {result} (base: {base_path}, full: {full_path})"
        )
        return result

    def create_composite_id(
        self,
        name: str | None,
        path: str | None,
        base_path: str | None,
    ) -> str:
        """Build a ``name__relative_path`` identifier unique under ``base_path``.

        Raises:
            ValueError: If any input is empty.
            PathTranslationError: If no relative path can be derived.
        """
        if not name:
            raise ValueError("Project name cannot be null or empty")
        if not path:
            raise ValueError("Project path cannot be null or empty")
        if not base_path:
            raise ValueError("Solution path cannot be null or empty")

        relative = self.get_relative_path(base_path, path)
        if not relative:
            raise PathTranslationError(
                f"Failed to get relative path from solution to project: {name}"
            )
        return f"{name}__{relative.translate(_ID_UNSAFE_CHARS)}"
