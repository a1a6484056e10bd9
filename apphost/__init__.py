"""Web application host serving the PWA service worker and manifest"""
