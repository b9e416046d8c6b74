"""Identifiers of product-specific collateral items: PVSS and ItemPath."""