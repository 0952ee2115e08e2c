"""
Pydantic models for release configuration loading.
"""
from pathlib import Path
from typing import Annotated, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field


class PropertyEntry(BaseModel):
    """A single key/value pair read from a property file."""
    key: str
    value: str
    line_number: int


class ParseIssue(BaseModel):
    """A malformed line that was skipped while parsing."""
    line_number: int
    line: str
    reason: str


class PropertyFile(BaseModel):
    """A property file and its entries in file order."""
    path: Path
    exists: bool = False
    entries: List[PropertyEntry] = []
    issues: List[ParseIssue] = []

    def as_dict(self) -> Dict[str, str]:
        """Flatten entries into a mapping; later duplicates win."""
        return {entry.key: entry.value for entry in self.entries}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a property, returning default when it is absent."""
        return self.as_dict().get(key, default)


class SigningConfig(BaseModel):
    """Credentials used to sign a release build."""
    key_alias: Optional[str] = None
    key_password: Optional[str] = None
    store_file: Optional[Path] = None
    store_password: Optional[str] = None


class SigningEnabled(BaseModel):
    """Release signing is configured with a keystore."""
    kind: Literal["enabled"] = "enabled"
    config: SigningConfig

    @property
    def enabled(self) -> bool:
        return True


class SigningDisabled(BaseModel):
    """Release signing is off; reason names the missing property."""
    kind: Literal["disabled"] = "disabled"
    config: SigningConfig = SigningConfig()
    reason: str

    @property
    def enabled(self) -> bool:
        return False


SigningState = Annotated[Union[SigningEnabled, SigningDisabled], Field(discriminator="kind")]


class ToolchainValues(BaseModel):
    """Values supplied by the application framework's build toolchain."""
    compile_sdk: int
    min_sdk: int
    target_sdk: int
    version_code: int
    version_name: str


class AppSettings(BaseModel):
    """Project settings from config/app.yaml."""
    namespace: str = "com.example.my_first_app"
    ndk_version: Optional[str] = "27.0.12077973"
    java_version: int = 11
    keys_file: str = "keys.properties"
    key_file: str = "key.properties"
    build_type: str = "release"
    flutter_source: str = ".."
    compile_sdk: Optional[int] = None
    min_sdk: Optional[int] = None
    target_sdk: Optional[int] = None


class ProjectLayout(BaseModel):
    """
    Where the project's configuration files live.

    root is the Android (Gradle) project directory holding the property
    files; source is the Flutter source directory holding pubspec.yaml and
    defaults to the parent of root.
    """
    root: Path
    source: Optional[Path] = None
    keys_file: str = "keys.properties"
    key_file: str = "key.properties"

    @property
    def keys_path(self) -> Path:
        return self.root / self.keys_file

    @property
    def key_path(self) -> Path:
        return self.root / self.key_file

    @property
    def source_root(self) -> Path:
        if self.source is not None:
            return self.source
        return self.root.absolute().parent

    @property
    def pubspec_path(self) -> Path:
        return self.source_root / "pubspec.yaml"

    @property
    def app_config_path(self) -> Path:
        return self.root / "config" / "app.yaml"

    def resolve(self, relative: str) -> Path:
        """Resolve a path from a property value against the Android project root."""
        path = Path(relative)
        if path.is_absolute():
            return path
        return self.root / path


class BuildVariantConfig(BaseModel):
    """Assembled configuration for one build type."""
    namespace: str
    ndk_version: Optional[str] = None
    build_type: str = "release"
    compile_sdk: int
    min_sdk: int
    target_sdk: int
    version_code: int
    version_name: str
    source_compatibility: str
    target_compatibility: str
    jvm_target: str
    manifest_placeholders: Dict[str, str] = {}
    signing: SigningState
