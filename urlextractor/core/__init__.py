"""Core configuration and helpers"""
