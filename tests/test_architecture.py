"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters can depend on domain but not on application
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and each other."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("listing_likes.domain.models*")
        .should_not_import("listing_likes.adapters*")
        .should_not_import("listing_likes.application*")
        .should_not_import("listing_likes.domain.contracts*")
        .should_not_import("listing_likes.domain.ports*")
        .may_import("listing_likes.domain.models*")
        .check("listing_likes")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("listing_likes.domain.ports*")
        .should_not_import("listing_likes.adapters*")
        .should_not_import("listing_likes.application*")
        .should_not_import("listing_likes.domain.contracts*")
        .may_import("listing_likes.domain.ports*")
        .may_import("listing_likes.domain.models*")
        .check("listing_likes")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("listing_likes.domain.contracts*")
        .should_not_import("listing_likes.adapters*")
        .should_not_import("listing_likes.application*")
        .may_import("listing_likes.domain*")
        .check("listing_likes")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("listing_likes.application*")
        .should_not_import("listing_likes.adapters*")
        .may_import("listing_likes.domain*")
        .may_import("listing_likes.application*")
        .check("listing_likes")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services; they only see domain ports."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("listing_likes.adapters*")
        .should_not_import("listing_likes.application*")
        .may_import("listing_likes.domain*")
        .may_import("listing_likes.adapters*")
        .check("listing_likes", only_direct_imports=True)
    )
