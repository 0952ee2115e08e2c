from release_props.build.config.assembly import MAPS_API_KEY, assemble_build_config, assemble_project
from release_props.build.config.models import (
    ProjectLayout,
    SigningDisabled,
    SigningEnabled,
    ToolchainValues
)
from .base import BaseProjectTest

KEY_PROPERTIES = """\
storePassword=store-pass
keyPassword=key-pass
keyAlias=upload
storeFile=upload-keystore.jks
"""

TOOLCHAIN = ToolchainValues(compile_sdk=35, min_sdk=21, target_sdk=35, version_code=3, version_name="1.0.2")


class TestAssembleBuildConfig(BaseProjectTest):
    """Combining the property files with toolchain values."""

    def test_empty_project(self):
        config = assemble_build_config(self.layout, TOOLCHAIN)

        self.assertEqual(config.manifest_placeholders, {MAPS_API_KEY: ""})
        self.assertIsInstance(config.signing, SigningDisabled)
        self.assertIsNone(config.signing.config.store_file)
        self.assertEqual(config.build_type, "release")
        self.assertEqual(config.namespace, "com.example.my_first_app")
        self.assertEqual(config.ndk_version, "27.0.12077973")

    def test_toolchain_values_pass_through(self):
        config = assemble_build_config(self.layout, TOOLCHAIN)
        self.assertEqual(config.compile_sdk, 35)
        self.assertEqual(config.min_sdk, 21)
        self.assertEqual(config.target_sdk, 35)
        self.assertEqual(config.version_code, 3)
        self.assertEqual(config.version_name, "1.0.2")

    def test_java_11_compile_targets(self):
        config = assemble_build_config(self.layout, TOOLCHAIN)
        self.assertEqual(config.source_compatibility, "11")
        self.assertEqual(config.target_compatibility, "11")
        self.assertEqual(config.jvm_target, "11")

    def test_maps_api_key_placeholder(self):
        self.write("keys.properties", "MAPS_API_KEY=AIzaTestKey\n")
        config = assemble_build_config(self.layout, TOOLCHAIN)
        self.assertEqual(config.manifest_placeholders[MAPS_API_KEY], "AIzaTestKey")

    def test_signing_from_key_file(self):
        self.write("key.properties", KEY_PROPERTIES)
        config = assemble_build_config(self.layout, TOOLCHAIN)

        self.assertIsInstance(config.signing, SigningEnabled)
        self.assertEqual(config.signing.config.store_file, self.root / "upload-keystore.jks")
        self.assertEqual(config.signing.config.key_alias, "upload")

    def test_custom_file_names(self):
        self.write("secrets/signing.properties", KEY_PROPERTIES)
        layout = ProjectLayout(root=self.root, key_file="secrets/signing.properties")
        config = assemble_build_config(layout, TOOLCHAIN)
        self.assertTrue(config.signing.enabled)

    def test_same_input_same_output(self):
        self.write("key.properties", KEY_PROPERTIES)
        self.write("keys.properties", "MAPS_API_KEY=abc\n")
        self.assertEqual(assemble_build_config(self.layout, TOOLCHAIN),
                         assemble_build_config(self.layout, TOOLCHAIN))


class TestAssembleProject(BaseProjectTest):
    """End to end from a project root."""

    def test_reads_settings_and_pubspec(self):
        self.write("config/app.yaml", "namespace: com.example.my_first_app\n"
                                      "ndk_version: 27.0.12077973\n"
                                      "java_version: 17\n")
        self.write_source("pubspec.yaml", "version: 2.1.0+9\n")
        self.write("key.properties", KEY_PROPERTIES)

        config = assemble_project(self.root)

        self.assertEqual(config.namespace, "com.example.my_first_app")
        self.assertEqual(config.ndk_version, "27.0.12077973")
        self.assertEqual(config.jvm_target, "17")
        self.assertEqual(config.version_name, "2.1.0")
        self.assertEqual(config.version_code, 9)
        self.assertTrue(config.signing.enabled)

    def test_explicit_source_dir(self):
        self.write_source("flutter_app/pubspec.yaml", "version: 4.0.0+40\n")
        self.write_source("pubspec.yaml", "version: 1.0.0+1\n")

        config = assemble_project(self.root, source=self.source / "flutter_app")

        self.assertEqual(config.version_name, "4.0.0")
        self.assertEqual(config.version_code, 40)

    def test_settings_rename_key_file(self):
        self.write("config/app.yaml", "key_file: release.properties\n")
        self.write("key.properties", KEY_PROPERTIES)
        config = assemble_project(str(self.root))
        self.assertFalse(config.signing.enabled)
