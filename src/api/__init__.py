"""API — camada de borda do canal WhatsApp.

Responsabilidades:
- Receber requests do webhook
- Validar assinaturas e payloads
- Converter o payload em mensagens internas (RawMessage)

Subpastas:
- connectors/: verificação, assinatura e parsing do webhook
- normalizers/: conversão de payloads externos → modelos internos
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: extração, normalização de transferências, persistência.
"""
