"""App: núcleo do proxy: casos de uso, normalização e infraestrutura.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, factories)
- domain/: modelos de requisição, payload canônico e resultado do upstream
- services/: normalização de datas, recorrência e montagem de payload
- use_cases/: criação de evento e diagnóstico do calendário
- infra/: client concreto do Google Calendar
- protocols/: contrato do serviço de calendário
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
