from storefront.config import settings


def money(v: float) -> str:
    return f"{settings.currency_symbol}{v:,.{settings.decimals}f}"
