from flask import Blueprint, current_app, jsonify

from trivia import get_game
from trivia.services.join.links import build_player_url, get_lan_ip, local_base_url, public_base_url
from trivia.services.join.qr import build_qr_data_url

info = Blueprint('info', __name__)


@info.route('/info', methods=['GET'])
def get_join_info():
    """
    Join details for the host screen: the URL players should open, its QR
    code, and the LAN/public variants. Public relay URL wins when present.
    """
    cfg = current_app.config
    port = cfg['PORT']
    page_url = cfg.get('PLAYER_PAGE_URL')
    ip = get_lan_ip()
    local_base = local_base_url(ip, port)
    public_base = public_base_url(cfg)

    socket_base = public_base or local_base
    target = build_player_url(socket_base, page_url)
    qr = build_qr_data_url(
        target,
        box_size=cfg.get('QR_BOX_SIZE', 8),
        border=cfg.get('QR_BORDER', 2),
        fill_color=cfg.get('QR_FILL_COLOR', 'black'),
        back_color=cfg.get('QR_BACK_COLOR', 'white'),
    )
    return jsonify({
        'qr': qr,
        'url': target,
        'localUrl': build_player_url(local_base, page_url),
        'publicUrl': build_player_url(public_base, page_url) if public_base else None,
        'ip': ip,
        'port': port,
    })


@info.route('/session', methods=['GET'])
def get_session_state():
    return jsonify(get_game().snapshot())
