"""Runtime data types: symbols, nil, environments, procedures and tail calls."""
