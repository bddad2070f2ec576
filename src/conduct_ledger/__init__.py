"""Student discipline-point ledger and school calendar resolver."""
