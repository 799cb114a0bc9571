"""API: camada de borda.

Subpastas:
- connectors/: clientes HTTP para APIs externas (Neynar)
- normalizers/: conversão de payloads externos → modelos internos
- routes/: endpoints HTTP

NÃO PODE conter: wiring de dependências nem settings.
"""
