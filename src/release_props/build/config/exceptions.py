"""
Exception classes with built-in guidance for release configuration loading.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, error_type: str = None, path: str = None,
                 property_name: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.path = path
        self.property_name = property_name
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class PropertyParseException(ConfigException):
    """Raised in strict mode when a property file contains a malformed line."""
    def __init__(self, message: str, path: str = None, line_number: int = None,
                 line: str = None):
        self.line_number = line_number
        self.line = line
        super().__init__(message, error_type="property_parse", path=path)

    def _generate_guidance(self):
        return f"""
❌ Malformed line in {self.path or 'property file'} (line {self.line_number}): {self.line!r}
💡 Property lines must look like key=value, key: value or key value.
   Comment lines start with '#' or '!'.
"""


class SigningDisabledException(ConfigException):
    """Raised when release signing is required but the key file does not enable it."""
    def __init__(self, message: str, key_file: str = None, missing: str = None):
        self.key_file = key_file
        self.missing = missing
        super().__init__(message, error_type="signing_disabled", path=key_file,
                         property_name=missing)

    def _generate_guidance(self):
        command = self._get_current_command()
        key_file = self.key_file or 'key.properties'
        return f"""
❌ Release signing is disabled: '{self.missing}' is not set in {key_file}
💡 Add the signing credentials to {key_file}:
   storeFile=<path to keystore, relative to the Android project directory>
   storePassword=<keystore password>
   keyAlias=<key alias>
   keyPassword=<key password>
   Then re-run: {command}
"""


class AppConfigException(ConfigException):
    """Raised when config/app.yaml or pubspec.yaml holds invalid values."""
    def __init__(self, message: str, path: str = None):
        super().__init__(message, error_type="app_config", path=path)

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ Invalid project configuration: {self}
💡 Fix {self.path or 'the file'} and re-run: {command}
"""
