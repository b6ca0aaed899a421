def events_named(received, name):
    return [pkt for pkt in received if pkt['name'] == name]


def test_socket_connect(sio_client):
    assert sio_client.is_connected()
    received = sio_client.get_received()
    assert events_named(received, 'connected')


def test_join_game_sends_state(client, sio_client):
    game_id = client.post('/api/new_game', json={}).get_json()['game_id']
    sio_client.get_received()  # flush

    sio_client.emit('join_game', {'game_id': game_id})
    received = sio_client.get_received()

    updates = events_named(received, 'game_state_update')
    assert updates
    assert updates[0]['args'][0]['state']['game_id'] == game_id


def test_join_unknown_game_reports_error(sio_client):
    sio_client.get_received()
    sio_client.emit('join_game', {'game_id': 'missing'})
    errors = events_named(sio_client.get_received(), 'error')
    assert errors[0]['args'][0]['error'] == 'Game not found'


def test_submit_word_over_websocket(client, sio_client):
    game_id = client.post('/api/new_game', json={}).get_json()['game_id']
    sio_client.emit('join_game', {'game_id': game_id})
    sio_client.get_received()

    sio_client.emit('submit_word', {'game_id': game_id, 'word': 'elma'})
    received = sio_client.get_received()

    result = events_named(received, 'word_result')[0]['args'][0]['result']
    assert result['outcome'] == 'accepted'
    # Room members get the new state as well
    updates = events_named(received, 'game_state_update')
    assert updates[-1]['args'][0]['state']['current_player'] == 2


def test_rejected_word_over_websocket(client, sio_client):
    game_id = client.post('/api/new_game', json={}).get_json()['game_id']
    sio_client.emit('join_game', {'game_id': game_id})
    sio_client.get_received()

    sio_client.emit('submit_word', {'game_id': game_id, 'word': 'qqqq'})
    received = sio_client.get_received()

    result = events_named(received, 'word_result')[0]['args'][0]['result']
    assert result['outcome'] == 'rejected'
    assert result['reason'] == 'not-in-dictionary'
    assert not events_named(received, 'game_state_update')


def test_set_mode_over_websocket(client, sio_client):
    game_id = client.post('/api/new_game', json={}).get_json()['game_id']
    sio_client.emit('join_game', {'game_id': game_id})
    sio_client.get_received()

    sio_client.emit('set_mode', {'game_id': game_id, 'mode': 'zamanli', 'time_limit': 20})
    updates = events_named(sio_client.get_received(), 'game_state_update')
    assert updates[-1]['args'][0]['state']['time_limit'] == 20
