def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import ricecombine.core.interfaces as I

    assert hasattr(I, "ContentLoaderProtocol")
    assert hasattr(I, "SourceReaderProtocol")
    assert hasattr(I, "LineClassifierProtocol")
    assert hasattr(I, "LineRewriterProtocol")
    assert sorted(I.__all__) == [
        "ContentLoaderProtocol",
        "LineClassifierProtocol",
        "LineRewriterProtocol",
        "SourceReaderProtocol",
    ]


def test_default_components_satisfy_protocols():
    import ricecombine.core.interfaces as I
    from ricecombine import LineClassifier, NamespaceRewriter, SharedFragmentMerger, SourceReader

    assert isinstance(SourceReader(), I.SourceReaderProtocol)
    assert isinstance(SharedFragmentMerger(fragment="shared_methods.hpp"), I.ContentLoaderProtocol)
    assert isinstance(LineClassifier(library_name="Rice"), I.LineClassifierProtocol)
    assert isinstance(NamespaceRewriter(library_name="Rice", product_name="Rice4RubyQt6"), I.LineRewriterProtocol)
