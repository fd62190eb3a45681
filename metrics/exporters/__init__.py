"""Metric exporters"""
