"""
CLI: price a cart for a customer, list the ad catalog and a customer's pricing rules.
Each command executes a command/query against the application built by create_app().
"""
from dataclasses import replace
from typing import List, Optional

import typer

from adcheckout.checkout import (
    BundleDiscount,
    DiscountRule,
    FlatPriceOverride,
    GetCustomerRules,
    ListAdTypes,
    PrepareCheckout,
    ThresholdPriceOverride,
)
from adcheckout.core import Application, Settings
from adcheckout.domain import AdCheckoutError
from adcheckout.main import create_app

app = typer.Typer(help="adcheckout: ad cart totals with customer pricing rules.")


def describe_rule(rule: DiscountRule) -> str:
    """One-line human description of a discount rule."""
    if isinstance(rule, BundleDiscount):
        return f"{rule.item.id}: {rule.bundle_size} for {rule.paid_units_per_bundle}"
    if isinstance(rule, FlatPriceOverride):
        return f"{rule.item.id}: {rule.discounted_price} per unit"
    if isinstance(rule, ThresholdPriceOverride):
        return f"{rule.item.id}: {rule.discounted_price} per unit from {rule.threshold} units"
    raise TypeError(f"Not a discount rule: {rule!r}")


def _application(ctx: typer.Context) -> Application:
    return ctx.obj


@app.callback()
def configure(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Overrides ADCHECKOUT_LOG_LEVEL"),
) -> None:
    """Build the application from ADCHECKOUT_* settings."""
    settings = Settings.from_env()
    if log_level:
        settings = replace(settings, log_level=log_level)
    try:
        ctx.obj = create_app(settings)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command()
def total(
    ctx: typer.Context,
    items: List[str] = typer.Argument(None, help="Ad type ids, one per unit (e.g. classic classic premium)"),
    customer: Optional[str] = typer.Option(None, "--customer", "-c", help="Customer id (default: ADCHECKOUT_DEFAULT_CUSTOMER)"),
) -> None:
    """Print the cart total after the customer's pricing rules."""
    application = _application(ctx)
    settings = application.container.resolve(Settings)
    cmd = PrepareCheckout(customer_id=customer or settings.default_customer, item_ids=list(items or []))
    try:
        result = application.execute(cmd)
    except AdCheckoutError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    typer.echo(f"{result:.2f}")


@app.command()
def catalog(ctx: typer.Context) -> None:
    """List ad types and prices."""
    for item in _application(ctx).execute(ListAdTypes()):
        typer.echo(f"{item.id:<10} {item.price:>8}  {item.name}")


@app.command()
def rules(
    ctx: typer.Context,
    customer: str = typer.Argument(..., help="Customer id"),
) -> None:
    """List a customer's pricing rules in application order."""
    found = _application(ctx).execute(GetCustomerRules(customer_id=customer))
    if not found:
        typer.echo(f"No pricing rules for {customer}")
        return
    for rule in found:
        typer.echo(describe_rule(rule))


def main() -> None:
    """Entry point for the adcheckout console command."""
    app()


if __name__ == "__main__":
    main()
