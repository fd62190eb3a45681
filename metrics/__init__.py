"""Metric models, filtering, aggregation and export"""
