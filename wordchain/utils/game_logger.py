"""
Game Logger Module for the Word Chain Server

Structured JSON logging for everything that touches a match: requests
coming in over HTTP or WebSocket, the responses sent back, and the events
the match engine and turn clock raise on their own (accepted and rejected
words, timeouts, game over).
"""

import logging
import json
import os
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


# Per-line format of the daily log file
LOG_LINE_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'


class GameLogger:
    """
    Centralized logging system for the word chain server.

    Every entry is a single JSON object with an event type (CLIENT_ACTION,
    SERVER_RESPONSE_*, GAME_EVENT, ERROR), the action name, who caused it
    and free-form details. Entries go to a dated file under ``log_dir``;
    only warnings and errors reach the console.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, level.upper(), logging.INFO)
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"wordchain_{datetime.now():%Y-%m-%d}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordchain_game')
        logger.setLevel(self.level)
        logger.propagate = False

        # Re-initialising (tests, reloader) must not stack handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(LOG_LINE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('[wordchain] %(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    @staticmethod
    def _client_identity(request) -> Dict[str, Optional[str]]:
        """Describe the caller; WebSocket requests carry a sid, HTTP ones do not."""
        sid = getattr(request, 'sid', None)
        return {
            'client_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'session_id': sid,
            'transport': 'websocket' if sid else 'http',
        }

    def _write(self, level: int, event_type: str, action: str,
               origin: Dict[str, Optional[str]], details: Dict[str, Any]):
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'origin': origin,
            'details': details,
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log an incoming client request.

        Args:
            request: Flask request object (HTTP or Socket.IO)
            action: e.g. 'new_game', 'submit_word', 'set_mode'
            game_id: Match identifier if applicable
            **kwargs: Additional details such as the submitted word
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            **kwargs
        }
        self._write(logging.INFO, 'CLIENT_ACTION', action, self._client_identity(request), details)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log the payload returned for a request, summarised.

        A rejected word is still a successful response; only request
        errors (bad input, unknown game, failures) are logged at ERROR.
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response': self._summarize_payload(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        level = logging.INFO if success else logging.ERROR
        self._write(level, event_type, action, self._client_identity(request), details)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       source: str = 'engine',
                       **kwargs):
        """
        Log something that happened inside a match.

        ``source`` names what raised the event: 'engine', 'clock', or the
        address of the client that forced it.
        """
        origin = {'client_ip': None, 'session_id': None, 'transport': source}
        self._write(logging.INFO, 'GAME_EVENT', event, origin, {'game_id': game_id, **kwargs})

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self._write(logging.ERROR, 'ERROR', action, self._client_identity(request), details)

    @staticmethod
    def _summarize_state(state: Dict[str, Any]) -> Dict[str, Any]:
        history = state.get('history') or []
        return {
            'mode': state.get('mode'),
            'round': f"{state.get('round')}/{state.get('max_rounds')}",
            'current_player': state.get('current_player'),
            'last_word': history[-1]['word'] if history else None,
            'words_played': len(history),
            'scores': state.get('scores'),
            'game_over': state.get('game_over'),
        }

    def _summarize_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace full snapshots in a response with a one-line summary."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = dict(data)
        if isinstance(summary.get('state'), dict):
            summary['state'] = self._summarize_state(summary['state'])

        result = summary.get('result')
        if isinstance(result, dict):
            summary['result'] = {
                'outcome': result.get('outcome'),
                'word': result.get('word'),
                'canonical': result.get('canonical'),
                'reason': result.get('reason'),
            }
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by event type and by match event."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        event_types = Counter()
        game_events = Counter()
        rejections = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    _, _, payload = line.rpartition(' | ')
                    try:
                        entry = json.loads(payload)
                    except ValueError:
                        continue
                    event_types[entry.get('event_type')] += 1
                    if entry.get('event_type') == 'GAME_EVENT':
                        game_events[entry.get('action')] += 1
                        if entry.get('action') == 'word_rejected':
                            rejections[entry.get('details', {}).get('reason')] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_kb': round(log_file.stat().st_size / 1024, 1),
            'total_entries': sum(event_types.values()),
            'event_types': dict(event_types),
            'game_events': dict(game_events),
            'rejections': dict(rejections),
        }


# Global logger instance
game_logger = GameLogger(os.getenv('LOG_DIR', 'logs'), os.getenv('LOG_LEVEL', 'INFO'))
