import pytest

from drbd8store.utilities.converters import (convert_boolean, convert_integer,
                                             convert_list, print_size)


@pytest.mark.ci
class TestConverters:
    @staticmethod
    def test_convert_list():
        """
        Converter, list, whitespace or comma separated
        """
        assert convert_list(" n1 n2  ") == ["n1", "n2"]
        assert convert_list("n1,n2, n3") == ["n1", "n2", "n3"]
        assert convert_list(["n1"]) == ["n1"]
        assert convert_list("") == []
        assert convert_list(None) == []

    @staticmethod
    @pytest.mark.parametrize('value, expected', [
        ("yes", True), ("Y", True), ("true", True), ("1", True), (True, True),
        ("no", False), ("false", False), ("0", False), ("", False), (None, False),
    ])
    def test_convert_boolean(value, expected):
        assert convert_boolean(value) is expected

    @staticmethod
    def test_convert_boolean_error():
        with pytest.raises(ValueError):
            convert_boolean("maybe")

    @staticmethod
    def test_convert_integer():
        assert convert_integer("514") == 514
        assert convert_integer("1.5") == 1
        assert convert_integer(None) is None
        assert convert_integer("a") is None

    @staticmethod
    def test_print_size():
        assert print_size(4194304, unit="B") == "4 MB"
        assert print_size(4194304, unit="B", compact=True) == "4m"
        assert print_size(1536, unit="MB") == "1.5 GB"
        assert print_size(None) == "-"
