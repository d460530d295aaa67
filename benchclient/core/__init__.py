"""Core utilities: errors, Prometheus metrics and request dependencies"""
