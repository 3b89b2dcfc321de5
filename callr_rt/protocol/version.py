PROTOCOL_VERSION = "1.0"
SERVER_BANNER = f"Realtime Basic Server {PROTOCOL_VERSION}"
