"""Terminal interface for URL Extractor"""
