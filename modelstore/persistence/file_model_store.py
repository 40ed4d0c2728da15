# ==============================================
# FileModelStore
# ==============================================
#
# PURPOSE:
#   Load and save models as .edmx files, one file per consumer type,
#   directly under a fixed root directory.
#
# CLASS: FileModelStore(ModelStore)
# ---------------------------------
#   Stateful — holds only the root location and its formatting options.
#   No open handles are kept between calls.
#
#   Constructor:
#   ------------
#   - __init__(location, path_strategy=None, schema_resolver=None,
#              indent=2, atomic_writes=True)
#       location must be a non-empty path. The directory is NOT created.
#       path_strategy(location, key) -> Path replaces get_file_path.
#       schema_resolver(consumer_type) -> str replaces get_default_schema.
#
#   Methods:
#   --------
#   - try_load(consumer_type) -> CompiledModel | None
#   - save(consumer_type, descriptor) -> None
#   - exists(consumer_type) -> bool
#   - get_file_path(consumer_type) -> Path       (hook)
#   - get_default_schema(consumer_type) -> str   (hook)
#
# FILE STRUCTURE:
# ---------------
#   <location>/
#   ├── MyApp.BlogContext.edmx
#   └── myapp.contexts.OrderContext.edmx
#
# ==============================================

import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, Union

from modelstore.metadata import CompiledModel, ModelDescriptor, compile_model
from modelstore.serialization import read_edmx, write_edmx
from modelstore.type_identity import ConsumerType, type_key
from .model_store import ModelStore

FILE_EXTENSION = ".edmx"

PathStrategy = Callable[[Path, str], Path]
SchemaResolver = Callable[[ConsumerType], str]


def _new_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class FileModelStore(ModelStore):
    """
    Loads or saves models from/into .edmx files at a specified location.
    """

    def __init__(
        self,
        location: Union[str, os.PathLike],
        path_strategy: Optional[PathStrategy] = None,
        schema_resolver: Optional[SchemaResolver] = None,
        indent: int = 2,
        atomic_writes: bool = True
    ):
        """
        Initialize the file model store.

        Args:
            location: Parent directory for the .edmx files
            path_strategy: Optional replacement for the key-to-path mapping
            schema_resolver: Optional replacement for the default-schema hook
            indent: Spaces per XML indentation level
            atomic_writes: Write to a temporary file and rename into place
        """
        if location is None or not os.fspath(location).strip():
            raise ValueError("location must be a non-empty path")

        self._location = Path(location)
        self._path_strategy = path_strategy
        self._schema_resolver = schema_resolver
        self._indent = indent
        self._atomic_writes = atomic_writes

    @property
    def location(self) -> Path:
        """The directory holding the .edmx files."""
        return self._location

    # ======================================
    # Loading
    # ======================================
    def try_load(self, consumer_type: ConsumerType) -> Optional[CompiledModel]:
        """
        Load the model saved for a consumer type.

        Returns:
            The compiled model, or None if no file exists for the type

        Raises:
            ModelDeserializationError: If the file exists but is not a valid model
            OSError: If the file cannot be read
        """
        file_path = self.get_file_path(consumer_type)

        if not file_path.exists():
            return None

        with open(file_path, "rb") as f:
            default_schema = self.get_default_schema(consumer_type)
            return read_edmx(f, default_schema)

    # ======================================
    # Saving
    # ======================================
    def save(self, consumer_type: ConsumerType, descriptor: ModelDescriptor) -> None:
        """
        Save a model for a consumer type, overwriting any previous file.

        The descriptor is compiled first so an invalid model is never
        written.

        Raises:
            ModelValidationError: If the descriptor is invalid
            OSError: If the file cannot be written
        """
        if descriptor is None:
            raise ValueError("descriptor must not be None")

        file_path = self.get_file_path(consumer_type)
        compile_model(descriptor, self.get_default_schema(consumer_type))

        if self._atomic_writes:
            self._write_atomic(file_path, descriptor)
        else:
            with open(file_path, "wb") as f:
                write_edmx(descriptor, f, indent=self._indent)

    def _write_atomic(self, file_path: Path, descriptor: ModelDescriptor) -> None:
        fd, temp_name = tempfile.mkstemp(
            dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                write_edmx(descriptor, f, indent=self._indent)
            os.chmod(temp_name, _new_file_mode())
            os.replace(temp_name, file_path)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise

    # ======================================
    # Utility
    # ======================================
    def exists(self, consumer_type: ConsumerType) -> bool:
        """Check whether a model file exists for a consumer type."""
        return self.get_file_path(consumer_type).exists()

    def get_file_path(self, consumer_type: ConsumerType) -> Path:
        """
        Get the path of the .edmx file for a consumer type.

        Args:
            consumer_type: A class or qualified name

        Returns:
            <location>/<qualified name>.edmx, unless a path strategy is set

        Raises:
            ValueError: If the key contains a path separator (default mapping only)
        """
        key = type_key(consumer_type)
        if self._path_strategy is not None:
            return Path(self._path_strategy(self._location, key))
        if "/" in key or "\\" in key:
            raise ValueError(f"Key '{key}' must not contain path separators")
        return self._location / (key + FILE_EXTENSION)

    def get_default_schema(self, consumer_type: ConsumerType) -> str:
        if self._schema_resolver is not None:
            return self._schema_resolver(consumer_type)
        return super().get_default_schema(consumer_type)

    def __repr__(self) -> str:
        return f"FileModelStore(location={str(self._location)!r})"
