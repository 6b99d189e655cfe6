"""Basic import tests to verify package structure."""


def test_import_malkus():
    """Verify main package imports."""
    import malkus
    assert malkus.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from malkus import core
    assert hasattr(core, "WaterWheel")


def test_import_patterns():
    """Verify patterns module structure exists."""
    from malkus import patterns
    assert hasattr(patterns, "__doc__")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from malkus import analysis
    assert hasattr(analysis, "__doc__")
