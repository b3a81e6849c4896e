"""Application Layer - use cases, serviços de aplicação e portas"""
