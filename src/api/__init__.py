"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests do frontend e checagens de saude
- Aplicar política de origem e método
- Validar e normalizar o corpo para modelos internos
- Converter falhas em respostas HTTP

Subpastas:
- normalizers/: corpo JSON → modelos internos
- validators/: gatekeeper de método, campos obrigatórios e origem
- routes/: endpoints HTTP (eventos, diagnóstico, health)

NÃO PODE conter: chamadas ao upstream nem regras de recorrência.
"""
