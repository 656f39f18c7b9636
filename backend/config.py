import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Socket.IO namespace shared by host and player pages
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Comma separated; '*' allows any origin (players load the page from elsewhere)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Optional externally hosted player page; gets ?host=<socket base> appended
    PLAYER_PAGE_URL = os.environ.get('PLAYER_PAGE_URL') or None
    # Optional public relay/tunnel base URL for cross-network play
    PUBLIC_BASE_URL = os.environ.get('PUBLIC_BASE_URL') or None
    MAX_NAME_LENGTH = int(os.environ.get('MAX_NAME_LENGTH', '20'))
    QR_BOX_SIZE = int(os.environ.get('QR_BOX_SIZE', '8'))
    QR_BORDER = int(os.environ.get('QR_BORDER', '2'))
    QR_FILL_COLOR = os.environ.get('QR_FILL_COLOR', '#f5c518')
    QR_BACK_COLOR = os.environ.get('QR_BACK_COLOR', '#06081a')
