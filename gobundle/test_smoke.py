"""
Minimal smoke test for the engine structure.
Tests that the public imports resolve and the pipeline runs end to end.
"""


def test_imports():
    from gobundle import BundleConfig, Minifier, build_bundle, bundle_project, minify_source  # noqa: F401
    from gobundle.bundle import assemble_bundle, write_bundle  # noqa: F401
    from gobundle.metadata import HeaderParser, MetadataExtractor  # noqa: F401
    from gobundle.parser import TreeSitterParser
    from gobundle.printer import Printer, TextCompactor  # noqa: F401
    from gobundle.transform import TreeTransformer  # noqa: F401

    assert TreeSitterParser().get_language() == "go"


def test_minifier_levels():
    from gobundle import Minifier, MinifyLevel

    source = "package main\n\n// entry\nfunc main() {\n\tvar message = 1\n\t_ = message\n}\n"
    outputs = {level: Minifier(level).minify(source, "main.go") for level in MinifyLevel}

    assert "// entry" not in outputs[MinifyLevel.COMMENTS]
    assert outputs[MinifyLevel.COMMENTS] == "package main;func main(){var message=1;_=message;}"
    assert outputs[MinifyLevel.TRUNCATE] == "package mai;func mai(){var mes=1;_=mes;}"
