# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : __init__.py
#   file_relpath : src/licensetemplate/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for LicenseTemplate.

This module defines the immutable `Config` snapshot used at runtime and the
`MutableConfig` builder used while merging configuration layers.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``[tool.license-template]`` in the project's ``pyproject.toml``
    3) Extra config files passed via ``--config`` (in the order provided)
    4) CLI / API overrides

Configuration is always passed explicitly; nothing here is process-global.
"""

from __future__ import annotations

import os

# For runtime type checks, prefer collections.abc
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from licensetemplate.config.io import (
    TomlTable,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from licensetemplate.config.keys import Toml
from licensetemplate.config.logging import LicenseTemplateLogger, get_logger
from licensetemplate.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: LicenseTemplateLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


def _abs_path_from(base: Path, raw: str | os.PathLike[str]) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative."""
    p = Path(raw)
    return (base / p).resolve() if not p.is_absolute() else p.resolve()


def normalize_extension(ext: str) -> str:
    """Return ``ext`` with exactly one leading dot (``"py"`` → ``".py"``)."""
    ext = ext.strip()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Produced by `MutableConfig.freeze` after merging all layers. Collections are
    tuples so the snapshot can be shared safely. Use `Config.thaw` to obtain a
    mutable builder for edits.

    Attributes:
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        template (Path | None): Absolute path of the license template.
        manifest (Path | None): The project's ``pyproject.toml``, if any.
        extensions (tuple[str, ...]): File suffixes to check (e.g. ``.py``).
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns relative to the project root.
        build_dirs (tuple[str, ...]): Build-output directories (relative to the root) to skip.
        use_gitignore (bool): Whether to honour the root ``.gitignore``.
        jobs (int): Worker threads used for checking (1 = sequential).
        fail_fast (bool): Stop at the first non-conforming file.
        verbosity_level (int | None): Program-output verbosity (None = inherit).
    """

    config_files: tuple[Path | str, ...]
    template: Path | None
    manifest: Path | None
    extensions: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    build_dirs: tuple[str, ...]
    use_gitignore: bool
    jobs: int
    fail_fast: bool
    verbosity_level: int | None

    def to_toml_dict(self) -> TomlTable:
        """Convert this snapshot into a TOML-serializable dict.

        Returns:
            TomlTable: Keys as accepted in ``[tool.license-template]``.
        """
        return {
            Toml.KEY_TEMPLATE: str(self.template) if self.template is not None else None,
            Toml.KEY_EXTENSIONS: list(self.extensions),
            Toml.KEY_EXCLUDE: list(self.exclude_patterns),
            Toml.KEY_BUILD_DIRS: list(self.build_dirs),
            Toml.KEY_USE_GITIGNORE: self.use_gitignore,
            Toml.KEY_JOBS: self.jobs,
            Toml.KEY_FAIL_FAST: self.fail_fast,
        }

    def to_toml(self) -> str:
        """Render this snapshot as TOML text."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            config_files=list(self.config_files),
            template=self.template,
            manifest=self.manifest,
            extensions=list(self.extensions),
            exclude_patterns=list(self.exclude_patterns),
            build_dirs=list(self.build_dirs),
            use_gitignore=self.use_gitignore,
            jobs=self.jobs,
            fail_fast=self.fail_fast,
            verbosity_level=self.verbosity_level,
        )


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every field uses ``None`` to mean "not set by this layer" so that a later
    layer only overrides what it actually specifies. An explicitly empty list
    (e.g. ``build_dirs = []``) is a setting and clears the inherited value.

    Attributes:
        config_files (list[Path | str]): Config sources merged so far.
        template (Path | None): Absolute path of the license template.
        manifest (Path | None): The project's ``pyproject.toml``, if any.
        extensions (list[str] | None): File suffixes to check.
        exclude_patterns (list[str] | None): Gitwildmatch patterns relative to the project root.
        build_dirs (list[str] | None): Build-output directories to skip.
        use_gitignore (bool | None): Whether to honour the root ``.gitignore``.
        jobs (int | None): Worker threads; ``0`` selects one per CPU.
        fail_fast (bool | None): Stop at the first non-conforming file.
        verbosity_level (int | None): Program-output verbosity.
    """

    config_files: list[Path | str] = field(default_factory=lambda: [])
    template: Path | None = None
    manifest: Path | None = None
    extensions: list[str] | None = None
    exclude_patterns: list[str] | None = None
    build_dirs: list[str] | None = None
    use_gitignore: bool | None = None
    jobs: int | None = None
    fail_fast: bool | None = None
    verbosity_level: int | None = None

    # ------------------------------- Loading -------------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict(), config_file=None)
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML table.

        The ``template`` path is resolved against the config file's directory
        (or the current directory when there is no file).

        Args:
            data (TomlTable): The tool table (top level of a standalone file, or
                ``[tool.license-template]``).
            config_file (Path | None): Source file, used as the resolution base.

        Returns:
            MutableConfig: The resulting draft.
        """
        logger.trace("TOML table: %s", data)
        draft = cls()
        cfg_dir: Path = config_file.parent.resolve() if config_file else Path.cwd()
        if config_file is not None:
            draft.config_files = [config_file]

        template_raw: str | None = get_string_value_or_none(data, Toml.KEY_TEMPLATE)
        if template_raw:
            draft.template = _abs_path_from(cfg_dir, template_raw)

        extensions: list[str] | None = get_string_list_or_none(data, Toml.KEY_EXTENSIONS)
        if extensions is not None:
            draft.extensions = [normalize_extension(e) for e in extensions if e.strip()]

        draft.exclude_patterns = get_string_list_or_none(data, Toml.KEY_EXCLUDE)
        draft.build_dirs = get_string_list_or_none(data, Toml.KEY_BUILD_DIRS)
        draft.use_gitignore = get_bool_value_or_none(data, Toml.KEY_USE_GITIGNORE)
        draft.jobs = get_int_value_or_none(data, Toml.KEY_JOBS)
        draft.fail_fast = get_bool_value_or_none(data, Toml.KEY_FAIL_FAST)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` the ``[tool.license-template]`` table is used;
        any other file is read as a standalone config with top-level keys.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None if a ``pyproject.toml`` has
                no ``[tool.license-template]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: TomlTable = get_table_value(toml_data, Toml.SECTION_TOOL)
            section: TomlTable = get_table_value(tool_tbl, PYPROJECT_TOOL_SECTION)
            if not section:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        manifest: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge configuration layers into a draft.

        Args:
            manifest (Path | None): The project's ``pyproject.toml`` (see
                `licensetemplate.project.find_manifest`).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after the manifest, in the given order.
            no_config (bool): If True, do not read ``[tool.license-template]`` from
                the manifest. Extra config files are still honoured.

        Returns:
            MutableConfig: A draft ready for CLI overrides and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()
        draft.manifest = manifest

        if manifest is not None and not no_config:
            project_cfg: MutableConfig | None = cls.from_toml_file(manifest)
            if project_cfg is not None:
                draft = draft.merge_with(project_cfg)

        for extra in extra_config_files or ():
            mc: MutableConfig | None = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            config_files=self.config_files + other.config_files,
            template=other.template if other.template is not None else self.template,
            manifest=other.manifest if other.manifest is not None else self.manifest,
            extensions=other.extensions if other.extensions is not None else self.extensions,
            exclude_patterns=other.exclude_patterns
            if other.exclude_patterns is not None
            else self.exclude_patterns,
            build_dirs=other.build_dirs if other.build_dirs is not None else self.build_dirs,
            use_gitignore=other.use_gitignore
            if other.use_gitignore is not None
            else self.use_gitignore,
            jobs=other.jobs if other.jobs is not None else self.jobs,
            fail_fast=other.fail_fast if other.fail_fast is not None else self.fail_fast,
            verbosity_level=other.verbosity_level
            if other.verbosity_level is not None
            else self.verbosity_level,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-``None`` value override the draft. Paths
        are resolved against the current working directory. Repeated options
        (``extensions``, ``exclude_patterns``) replace the configured lists
        when non-empty.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)
        cwd: Path = Path.cwd()

        template: str | os.PathLike[str] | None = args.get("template")
        if template is not None:
            self.template = _abs_path_from(cwd, template)

        extensions: Iterable[str] | None = args.get("extensions")
        if extensions:
            self.extensions = [normalize_extension(e) for e in extensions]

        exclude_patterns: Iterable[str] | None = args.get("exclude_patterns")
        if exclude_patterns:
            self.exclude_patterns = list(exclude_patterns)

        for key in ("use_gitignore", "jobs", "fail_fast", "verbosity_level"):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, value)

        return self

    # ------------------------------- Freezing -------------------------------
    def sanitize(self) -> None:
        """Normalize values that would otherwise be invalid at runtime."""
        if self.jobs is not None and self.jobs < 0:
            logger.warning("Invalid jobs value %d; using 1", self.jobs)
            self.jobs = 1
        if self.jobs == 0:
            self.jobs = os.cpu_count() or 1
        # Keep first occurrence order while dropping duplicates
        if self.extensions is not None:
            self.extensions = list(dict.fromkeys(self.extensions))

    def freeze(self) -> Config:
        """Return an immutable snapshot of this draft."""
        self.sanitize()
        return Config(
            config_files=tuple(self.config_files),
            template=self.template,
            manifest=self.manifest,
            extensions=tuple(self.extensions or ()),
            exclude_patterns=tuple(self.exclude_patterns or ()),
            build_dirs=tuple(self.build_dirs or ()),
            use_gitignore=bool(self.use_gitignore) if self.use_gitignore is not None else True,
            jobs=self.jobs if self.jobs is not None else 1,
            fail_fast=bool(self.fail_fast),
            verbosity_level=self.verbosity_level,
        )


__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
    "normalize_extension",
]
