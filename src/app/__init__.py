"""App: orquestração, casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (AppContext, inicialização)
- domain/: modelos de domínio (livestream)
- use_cases/: casos de uso do livestream
- protocols/: contratos/interfaces
- observability/: correlation_id por request

Padrão: app executa; api adapta; config configura; utils apoia.
"""
