"""Ocean tidal loading tools."""
