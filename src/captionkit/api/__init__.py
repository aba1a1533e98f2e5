"""HTTP service exposing caption parsing and export."""
