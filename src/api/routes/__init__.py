"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (/api/...)
- Validação inicial de request (body, query params)
- Delegação para use cases / cliente Neynar via AppContext
- Mapeamento de erros: input do caller → 400, resto → 500

Estrutura:
- routes/health/: /api/hello
- routes/livestream/: /api/present, /api/cast
- routes/auth/: /api/auth/login, /api/auth/signer-status
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
