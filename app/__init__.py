"""Scan orchestration and console reporting"""
