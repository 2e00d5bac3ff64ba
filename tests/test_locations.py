import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from simpleconf.config.models import LocationSettings
from simpleconf.errors import MissingResourceContextError, PropertiesFileNotFoundError
from simpleconf.properties import (
    DEFAULT_LOCATIONS,
    DirectoryResourceContext,
    LocationKind,
    PropertyLocation,
    default_locations,
)

VARIABLE = "simpleconf.test.location"


class ClasspathLocationTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        (self.root / "WEB-INF").mkdir()
        (self.root / "WEB-INF" / "application.properties").write_text("foo=bar\n", encoding="utf-8")
        self.context = DirectoryResourceContext(self.root)

    def test_requires_a_context(self) -> None:
        location = PropertyLocation("classpath", "/WEB-INF/application.properties", LocationKind.CLASSPATH)
        with self.assertRaises(MissingResourceContextError):
            location.open(None)

    def test_rejects_context_without_resource_lookup(self) -> None:
        location = PropertyLocation("classpath", "/WEB-INF/application.properties", LocationKind.CLASSPATH)
        with self.assertRaises(MissingResourceContextError):
            location.open(object())

    def test_opens_existing_resource(self) -> None:
        location = PropertyLocation("classpath", "/WEB-INF/application.properties", LocationKind.CLASSPATH)
        stream = location.open(self.context)
        self.assertIsNotNone(stream)
        with stream:
            self.assertEqual(stream.read(), b"foo=bar\n")

    def test_missing_resource_is_absent(self) -> None:
        location = PropertyLocation("classpath", "/WEB-INF/applicationProperties.xml", LocationKind.CLASSPATH)
        self.assertIsNone(location.open(self.context))

    def test_is_xml_follows_source_suffix(self) -> None:
        self.assertFalse(PropertyLocation("c", "/WEB-INF/application.properties", LocationKind.CLASSPATH).is_xml())
        self.assertTrue(PropertyLocation("c", "/WEB-INF/applicationProperties.xml", LocationKind.CLASSPATH).is_xml())
        self.assertTrue(PropertyLocation("c", "/WEB-INF/PROPS.XML", LocationKind.CLASSPATH).is_xml())


class OverrideVariableLocationTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp = Path(self._tmp.name)
        self.location = PropertyLocation("override variable", VARIABLE, LocationKind.OVERRIDE_VARIABLE)

        env_patch = patch.dict(os.environ)
        env_patch.start()
        self.addCleanup(env_patch.stop)
        os.environ.pop(VARIABLE, None)

    def test_unset_variable_is_absent(self) -> None:
        self.assertIsNone(self.location.open(None))
        self.assertFalse(self.location.is_xml())

    def test_opens_configured_file(self) -> None:
        path = self.tmp / "override.properties"
        path.write_text("foo=override\n", encoding="utf-8")
        os.environ[VARIABLE] = str(path)

        stream = self.location.open(None)
        with stream:
            self.assertEqual(stream.read(), b"foo=override\n")
        self.assertFalse(self.location.is_xml())

    def test_is_xml_follows_current_variable_value(self) -> None:
        os.environ[VARIABLE] = str(self.tmp / "override.Xml")
        self.assertTrue(self.location.is_xml())
        os.environ[VARIABLE] = str(self.tmp / "override.properties")
        self.assertFalse(self.location.is_xml())

    def test_missing_file_is_a_configuration_error(self) -> None:
        os.environ[VARIABLE] = "does-not-exist.properties"
        with self.assertRaises(PropertiesFileNotFoundError) as ctx:
            self.location.open(None)

        self.assertIsInstance(ctx.exception, FileNotFoundError)
        self.assertTrue(ctx.exception.path.is_absolute())
        self.assertIn(str(ctx.exception.path), str(ctx.exception))

    def test_directory_is_a_configuration_error(self) -> None:
        os.environ[VARIABLE] = str(self.tmp)
        with self.assertRaises(PropertiesFileNotFoundError):
            self.location.open(None)

    def test_unreadable_file_is_a_configuration_error(self) -> None:
        path = self.tmp / "locked.properties"
        path.write_text("foo=locked\n", encoding="utf-8")
        os.environ[VARIABLE] = str(path)

        # Root ignores permission bits, so chmod alone cannot make the file unreadable.
        with patch("simpleconf.properties.locations.os.access", return_value=False) as access:
            with self.assertRaises(PropertiesFileNotFoundError) as ctx:
                self.location.open(None)

        access.assert_called_once_with(path, os.R_OK)
        self.assertEqual(ctx.exception.path, path.absolute())


class DefaultLocationTests(unittest.TestCase):
    def test_default_order(self) -> None:
        self.assertEqual(
            [(location.source, location.kind) for location in DEFAULT_LOCATIONS],
            [
                ("/WEB-INF/application.properties", LocationKind.CLASSPATH),
                ("/WEB-INF/applicationProperties.xml", LocationKind.CLASSPATH),
                ("application.properties.path", LocationKind.OVERRIDE_VARIABLE),
            ],
        )

    def test_locations_from_settings(self) -> None:
        settings = LocationSettings(
            plain_resource="/conf/app.properties",
            xml_resource="/conf/app.xml",
            override_variable="APP_PROPERTIES",
        )
        plain, xml, override = default_locations(settings)
        self.assertEqual(plain.source, "/conf/app.properties")
        self.assertEqual(xml.source, "/conf/app.xml")
        self.assertEqual(override.source, "APP_PROPERTIES")
        self.assertEqual(override.name, "override variable")

    def test_locations_are_immutable(self) -> None:
        with self.assertRaises(AttributeError):
            DEFAULT_LOCATIONS[0].source = "/elsewhere"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
