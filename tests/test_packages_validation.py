from conftest import make_package_version

from core.domain.field import ErrorType, FieldPath
from core.domain.models import ObjectMeta, Package, PackageVersion
from core.validation import (
    validate_package,
    validate_package_version,
    validate_package_version_name,
    validate_package_version_spec_package_name,
    validate_package_version_spec_version,
)

PREFIX_MSG = "must begin with <spec.packageName> + '.'"


def test_valid_package(valid_package):
    assert validate_package(valid_package) == []


def test_package_with_two_segments():
    errs = validate_package(Package(metadata=ObjectMeta(name="a.b")))

    assert len(errs) == 1
    assert errs[0].type is ErrorType.INVALID
    assert errs[0].field == FieldPath("metadata", "name")
    assert "at least three segments" in errs[0].detail


def test_package_without_name():
    errs = validate_package(Package())

    assert [e.type for e in errs] == [ErrorType.REQUIRED]


def test_valid_package_version(valid_package_version):
    assert validate_package_version(valid_package_version) == []


def test_package_version_all_empty_reports_every_rule():
    errs = validate_package_version(make_package_version("x", "", ""))

    rendered = [str(e) for e in errs]
    assert rendered == [
        "spec.packageName: Required value: can not be empty",
        "spec.packageName: Required value",
        'spec.version: Invalid value: "": cannot be empty',
        'metadata.name: Invalid value: "x": ' + PREFIX_MSG,
    ]


def test_package_version_name_without_prefix():
    errs = validate_package_version(make_package_version("other.1.0.0", "my.pkg.example.com", "1.0.0"))

    assert len(errs) == 1
    assert errs[0].field == FieldPath("metadata", "name")
    assert errs[0].bad_value == "other.1.0.0"
    assert errs[0].detail == PREFIX_MSG


def test_name_prefix_needs_separator():
    errs = validate_package_version(
        make_package_version("my.pkg.example.com1.0.0", "my.pkg.example.com", "1.0.0")
    )

    assert [e.detail for e in errs] == [PREFIX_MSG]


def test_name_prefix_checked_even_with_invalid_package_name():
    errs = validate_package_version(make_package_version("pkg.1.0.0", "pkg", "1.0.0"))

    assert [str(e.field) for e in errs] == ["spec.packageName"]

    errs = validate_package_version(make_package_version("other.1.0.0", "pkg", "1.0.0"))
    assert [str(e.field) for e in errs] == ["spec.packageName", "metadata.name"]


def test_rule_functions_use_given_paths():
    path = FieldPath("spec", "template")

    assert validate_package_version_spec_version("", path)[0].field == path
    assert validate_package_version_spec_version("1.0.0", path) == []
    assert validate_package_version_name("a.b", "c", path)[0].field == path
    assert validate_package_version_spec_package_name("my.pkg.example.com", path) == []


def test_validation_does_not_mutate_input(valid_package_version):
    before = valid_package_version.model_dump()
    validate_package_version(valid_package_version)
    validate_package_version(PackageVersion())

    assert valid_package_version.model_dump() == before


def test_package_version_from_wire_keys():
    pv = PackageVersion.model_validate(
        {
            "kind": "PackageVersion",
            "metadata": {"name": "my.pkg.example.com.2.0.0"},
            "spec": {"packageName": "my.pkg.example.com", "version": "2.0.0", "extra": True},
        }
    )

    assert pv.spec.package_name == "my.pkg.example.com"
    assert validate_package_version(pv) == []
