import moecore


def test_public_names_resolve():
    missing = [name for name in moecore.__all__ if not hasattr(moecore, name)]
    assert missing == []


def test_subpackages_export_what_they_declare():
    import moecore.array
    import moecore.core
    import moecore.foundation
    import moecore.hooks
    import moecore.problem

    for module in (moecore.array, moecore.core, moecore.foundation, moecore.hooks, moecore.problem):
        for name in module.__all__:
            assert hasattr(module, name), f"{module.__name__}.{name}"
