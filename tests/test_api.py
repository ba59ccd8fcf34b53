import logging

from wordl.services.challenge_codec import encode_challenge


def start_game(client, **payload):
    response = client.post('/api/new_game', json=payload)
    assert response.status_code == 200
    body = response.get_json()
    assert body['success']
    return body['game_id'], body['state']


def test_new_game_hides_answer(client):
    game_id, state = start_game(client)
    assert state['phase'] == 'PLAYING'
    assert state['word_length'] == 5
    assert state['max_guesses'] == 6
    assert state['answer'] is None
    assert state['hint'] == 'Make your first guess!'


def test_new_game_rejects_bad_difficulty(client):
    response = client.post('/api/new_game', json={'difficulty': 'extreme'})
    assert response.status_code == 400
    assert not response.get_json()['success']


def test_invalid_challenge_starts_random_game(client):
    game_id, state = start_game(client, challenge='not-a-token!')
    assert state['hint'] == 'Invalid challenge string, playing random game.'
    assert state['challenge'] is False


def test_guess_flow_through_challenge(client):
    game_id, state = start_game(client, challenge=encode_challenge('apple'), max_guesses=6)
    assert state['challenge'] is True

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'adieu'})
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['rows'][0][0] == ['a', 'CORRECT']
    assert state['rows'][0][3] == ['e', 'PRESENT']
    assert state['spoken_feedback'] == 'A correct. E elsewhere. D, I, U not in word.'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Not a valid word'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'apple'})
    state = response.get_json()['state']
    assert state['phase'] == 'WON'
    assert state['answer'] == 'apple'
    assert state['emoji_grid'] == '🟩⬛⬛🟨⬛\n🟩🟩🟩🟩🟩'


def test_guess_requires_body(client):
    game_id, _ = start_game(client)
    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400


def test_unknown_game_is_404(client):
    assert client.get('/api/game/missing/state').status_code == 404
    assert client.post('/api/game/missing/guess', json={'guess': 'apple'}).status_code == 404


def test_keys_drive_the_session(client):
    game_id, _ = start_game(client)
    for key in 'apple':
        client.post(f'/api/game/{game_id}/key', json={'key': key})
    response = client.post(f'/api/game/{game_id}/key', json={'key': 'Enter'})
    state = response.get_json()['state']
    assert state['guesses'] == ['apple']
    assert state['phase'] == 'WON'


def test_key_requires_value(client):
    game_id, _ = start_game(client)
    assert client.post(f'/api/game/{game_id}/key', json={}).status_code == 400


def test_next_game_clears_challenge(client):
    game_id, _ = start_game(client, challenge=encode_challenge('crane'))
    response = client.post(f'/api/game/{game_id}/next', json={'word_length': 4})
    state = response.get_json()['state']
    assert state['challenge'] is False
    assert state['game_number'] == 2
    assert state['word_length'] == 4
    assert state['guesses'] == []


def test_challenge_link(client):
    game_id, _ = start_game(client)
    body = client.get(f'/api/game/{game_id}/challenge').get_json()
    assert body['challenge_url'].endswith('?challenge=' + encode_challenge('apple'))
    assert body['seeded'] is False


def test_seeded_game_links_to_seed(client):
    game_id, state = start_game(client, seed=7, game=3)
    assert state['seeded'] is True
    assert state['game_number'] == 3
    body = client.get(f'/api/game/{game_id}/challenge').get_json()
    assert body['challenge_url'].endswith('?seed=7&length=5&game=3')


def test_share_result_only_after_game_over(client):
    game_id, _ = start_game(client)
    assert client.post(f'/api/game/{game_id}/share', json={}).status_code == 400

    client.post(f'/api/game/{game_id}/guess', json={'guess': 'apple'})
    body = client.post(f'/api/game/{game_id}/share', json={}).get_json()
    assert body['body'].endswith('hello wordl 1/6\n🟩🟩🟩🟩🟩')
    assert body['state']['hint'] == 'Result copied to clipboard!'


def test_share_challenge_link_while_playing(client):
    game_id, _ = start_game(client)
    body = client.post(f'/api/game/{game_id}/share', json={'kind': 'challenge'}).get_json()
    assert '?challenge=' in body['body']
    assert body['state']['hint'] == 'Link copied to clipboard!'


def test_delete_game(client):
    game_id, _ = start_game(client)
    assert client.delete(f'/api/game/{game_id}').status_code == 200
    assert client.delete(f'/api/game/{game_id}').status_code == 404
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health(client):
    start_game(client)
    body = client.get('/api/health').get_json()
    assert body['status'] == 'healthy'
    assert body['active_games'] >= 1


def test_socket_keys_update_game_room(app, client):
    game_id, _ = start_game(client)
    socket_client = app.socketio.test_client(app)
    socket_client.emit('join_game', {'game_id': game_id})
    received = socket_client.get_received()
    assert received[-1]['name'] == 'game_state'

    for key in 'apple':
        socket_client.emit('key', {'game_id': game_id, 'key': key})
    socket_client.emit('key', {'game_id': game_id, 'key': 'Enter'})

    states = [event['args'][0] for event in socket_client.get_received() if event['name'] == 'game_state']
    assert states[-1]['phase'] == 'WON'
    assert states[-1]['guesses'] == ['apple']


def test_socket_unknown_game_reports_error(app):
    socket_client = app.socketio.test_client(app)
    socket_client.emit('key', {'game_id': 'missing', 'key': 'a'})
    received = socket_client.get_received()
    assert received[-1]['name'] == 'error'
    assert received[-1]['args'][0]['error'] == 'Game not found'


def test_non_object_bodies_are_rejected_as_input(client):
    game_id, _ = start_game(client)
    response = client.post(f'/api/game/{game_id}/guess', json=['guess'])
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'

    response = client.post(f'/api/game/{game_id}/key', json=['a'])
    assert response.status_code == 400

    response = client.post('/api/new_game', json=['challenge'])
    assert response.status_code == 200

    response = client.post(f'/api/game/{game_id}/next', json=[4])
    assert response.status_code == 200
    assert response.get_json()['state']['word_length'] == 5

    response = client.post(f'/api/game/{game_id}/share', json=['challenge'])
    assert response.status_code == 400


def test_key_response_is_logged(client, caplog):
    game_id, _ = start_game(client)
    caplog.set_level(logging.INFO, logger='wordl_game')
    client.post(f'/api/game/{game_id}/key', json={'key': 'a'})
    responses = [r.getMessage() for r in caplog.records if 'SERVER_RESPONSE_SUCCESS' in r.getMessage()]
    assert any('"action": "key"' in message for message in responses)
