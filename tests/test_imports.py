def test_package_imports() -> None:
    import dealer_inventory  # noqa: F401

    from dealer_inventory.core import config  # noqa: F401
    from dealer_inventory.export import writers  # noqa: F401
    from dealer_inventory.processing import catalog, sanitizer, valuation  # noqa: F401


def test_default_catalog_paths() -> None:
    from dealer_inventory.core.config import CATALOG_DEFAULT_INPUT, CATALOG_DEFAULT_OUTPUT, CATALOG_PUBLIC_COPY

    assert CATALOG_DEFAULT_INPUT.replace("\\", "/").endswith("/public/inventorycsv.csv")
    assert CATALOG_DEFAULT_OUTPUT.replace("\\", "/").endswith("/inventory/inventoryFB.csv")
    assert CATALOG_PUBLIC_COPY.replace("\\", "/").endswith("/public/inventoryFB.csv")


def test_config_defaults_are_resolved_at_import() -> None:
    import dataclasses

    from dealer_inventory.core.config import CatalogConfig, SanitizerConfig, ValuationConfig

    for cls in (ValuationConfig, SanitizerConfig, CatalogConfig):
        for f in dataclasses.fields(cls):
            assert f.default is not dataclasses.MISSING
            assert f.default_factory is dataclasses.MISSING
