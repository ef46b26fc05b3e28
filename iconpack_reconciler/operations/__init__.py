"""Reconciliation operations over parsed resource documents."""
