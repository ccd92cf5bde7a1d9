"""Tests for the operator CLI."""

from click.testing import CliRunner

from ims.config import Settings
from ims.infrastructure.bootstrap import build_container, initialize_database
from ims.infrastructure.cli.main import cli


def _container(password: str | None = "s3cret"):
    return build_container(
        Settings(
            database_url="sqlite://",
            jwt_secret="a-test-secret-that-is-long-enough-for-hs256",
            password_hash_iterations=1_000,
            default_manager_email="admin@example.com",
            default_manager_password=password,
        )
    )


def test_init_db_seeds_default_manager():
    container = _container()
    result = CliRunner().invoke(cli, ["init-db"], obj=container)

    assert result.exit_code == 0, result.output
    assert "Default manager 'admin@example.com' created." in result.output
    assert container.auth_service.login("admin@example.com", "s3cret")


def test_init_db_without_password_skips_seed():
    result = CliRunner().invoke(cli, ["init-db"], obj=_container(password=None))
    assert result.exit_code == 0, result.output
    assert "No default manager seeded" in result.output


def test_manager_add_and_duplicate():
    container = _container()
    initialize_database(container)
    runner = CliRunner()

    result = runner.invoke(
        cli, ["manager", "add", "--email", "clerk@example.com", "--password", "pa55"], obj=container
    )
    assert result.exit_code == 0, result.output
    assert "Manager 'clerk@example.com' added" in result.output

    result = runner.invoke(
        cli, ["manager", "add", "--email", "clerk@example.com", "--password", "pa55"], obj=container
    )
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_product_list_and_inventory_value():
    container = _container()
    initialize_database(container)
    runner = CliRunner()

    result = runner.invoke(cli, ["product", "list"], obj=container)
    assert "No products found." in result.output

    container.inventory_service.add_product("Widget", "9.99", 9)
    result = runner.invoke(cli, ["product", "list"], obj=container)
    assert result.exit_code == 0, result.output
    assert "Widget" in result.output
    assert "LOW" in result.output

    result = runner.invoke(cli, ["inventory", "value"], obj=container)
    assert result.exit_code == 0, result.output
    assert "Inventory value: $89.91" in result.output
