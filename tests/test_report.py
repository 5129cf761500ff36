import io
import unittest

from pydantic import ValidationError

from configstore import FieldDescriptor, FieldKind, ReportSettings, UnsupportedTypeError, load, print_config, render
from configstore.report import render_value
from records import SAMPLE_ENV, PlainConfig, SampleConfig, UnsupportedConfig


def _descriptor(kind: FieldKind, secret: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name="value", kind=kind, env="VALUE", default="", secret=secret)


class RenderValueTests(unittest.TestCase):
    def test_non_secret_values(self) -> None:
        self.assertEqual(render_value(_descriptor(FieldKind.INT), -3), "-3")
        self.assertEqual(render_value(_descriptor(FieldKind.BOOL), True), "true")
        self.assertEqual(render_value(_descriptor(FieldKind.BOOL), False), "false")
        self.assertEqual(render_value(_descriptor(FieldKind.STR), "foo"), "foo")
        self.assertEqual(render_value(_descriptor(FieldKind.STRINGS), ["foo", "bar"]), "[foo bar]")
        self.assertEqual(render_value(_descriptor(FieldKind.STRINGS), []), "[]")
        self.assertEqual(render_value(_descriptor(FieldKind.INT_MAP), {"foo": 1, "bar": 2}), "[bar:2 foo:1]")

    def test_secret_set_is_masked(self) -> None:
        self.assertEqual(render_value(_descriptor(FieldKind.STR, secret=True), "hunter2"), "********")
        self.assertEqual(render_value(_descriptor(FieldKind.STRINGS, secret=True), ["a"]), "********")

    def test_secret_unset_is_empty(self) -> None:
        self.assertEqual(render_value(_descriptor(FieldKind.STR, secret=True), ""), "")
        self.assertEqual(render_value(_descriptor(FieldKind.INT_MAP, secret=True), {}), "")

    def test_secret_int_always_masked(self) -> None:
        self.assertEqual(render_value(_descriptor(FieldKind.INT, secret=True), 0), "********")

    def test_custom_mask(self) -> None:
        settings = ReportSettings(mask="<hidden>")
        self.assertEqual(render_value(_descriptor(FieldKind.STR, secret=True), "x", settings), "<hidden>")

    def test_unknown_kind(self) -> None:
        descriptor = FieldDescriptor(name="ratio", kind="float", env="RATIO", default="", secret=False)  # type: ignore[arg-type]
        with self.assertRaises(UnsupportedTypeError):
            render_value(descriptor, 1.5)


class RenderTests(unittest.TestCase):
    def test_table(self) -> None:
        config = load(SampleConfig(), environ=SAMPLE_ENV)
        expected = (
            "OPTION                    ENV VAR            SETTING\n"
            "int_value                 INT_VAL            2\n"
            "bool_value                BOOL_VAL           false\n"
            "string_value              STRING_VAL         foo\n"
            "string_value_no_default   NO_DEFAULT_VAL     bar\n"
            "string_slice_value        STRING_SLICE_VAL   [a b]\n"
            "int_map_value             INT_MAP_VAL        [c:3 d:4]\n"
            "secret_int_value          SECRET_INT_VAL     ********\n"
        )
        self.assertEqual(render(config), expected)

    def test_secret_never_printed(self) -> None:
        config = load(PlainConfig(), environ={"API_KEY": "hunter2"})
        output = render(config)
        self.assertNotIn("hunter2", output)
        self.assertIn("********", output)

    def test_unsupported_field_type(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            render(UnsupportedConfig())
        with self.assertRaises(UnsupportedTypeError):
            print_config(UnsupportedConfig(), stream=io.StringIO())

    def test_unset_secret_row_is_empty(self) -> None:
        config = load(PlainConfig(), environ={})
        api_key_row = render(config).splitlines()[1]
        self.assertEqual(api_key_row.rstrip(), "api_key   API_KEY")

    def test_padding(self) -> None:
        config = load(PlainConfig(), environ={})
        header = render(config, ReportSettings(padding=1)).splitlines()[0]
        self.assertEqual(header, "OPTION  ENV VAR SETTING")

    def test_print_config_writes_to_stream(self) -> None:
        config = load(SampleConfig(), environ={})
        stream = io.StringIO()
        print_config(config, stream=stream)
        self.assertEqual(stream.getvalue(), render(config))

    def test_settings_are_validated(self) -> None:
        with self.assertRaises(ValidationError):
            ReportSettings(padding=-1)
        with self.assertRaises(ValidationError):
            ReportSettings(colour="red")


if __name__ == "__main__":
    unittest.main()
