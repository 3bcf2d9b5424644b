# Route modules for the studio API, one module per endpoint group.
