"""Invoice use cases: create, fetch and yank invoices, upload parcels."""
