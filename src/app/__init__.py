"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo end-to-end do webhook inbound
- use_cases/: casos de uso (sem IO direto)
- services/: adapter de texto e roteamento de registros
- infra/: implementações concretas de IO (OpenAI, Graph API, PDF, Sheets)
- protocols/: contratos/interfaces
- domain/: mensagens inbound
- observability/: correlation_id

Padrão: app executa; api adapta; ai extrai; utils apoia.
"""
