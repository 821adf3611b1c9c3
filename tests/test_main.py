import logging

import pytest
from concurrent_log_handler import ConcurrentRotatingFileHandler

from uploadcare_loader.main import main, parse_widths

def test_main_prints_url(clean_env, no_dotenv, capsys):
    clean_env.setenv('UPLOADCARE_PUBLIC_KEY', 'test-public-key')

    main(['https://example.com/image.png', '--width', '500'])

    out = capsys.readouterr().out.strip()
    assert out == (
        'https://test-public-key.ucr.io/-/format/auto/-/stretch/off/-/progressive/yes/'
        '-/resize/500x/-/quality/normal/https://example.com/image.png'
    )

def test_main_development_override(clean_env, no_dotenv, capsys):
    main(['/image.png', '--width', '500', '--environment', 'development'])

    assert capsys.readouterr().out.strip() == '/image.png'

def test_main_prints_table_and_srcset(clean_env, no_dotenv, capsys):
    clean_env.setenv('UPLOADCARE_PUBLIC_KEY', 'test-public-key')

    main(['https://example.com/image.jpg', '--widths', '1080,640'])

    out = capsys.readouterr().out
    assert 'Width' in out
    assert 'URL' in out
    assert '/-/resize/640x/' in out
    assert out.strip().splitlines()[-1].endswith('https://example.com/image.jpg 1080w')

def test_main_exits_on_missing_credentials(clean_env, no_dotenv):
    with pytest.raises(SystemExit) as exc_info:
        main(['/image.png'])

    assert exc_info.value.code == 1

def test_main_rejects_invalid_widths(clean_env, no_dotenv):
    with pytest.raises(SystemExit) as exc_info:
        main(['/image.png', '--widths', '640,big'])

    assert exc_info.value.code == 2

def test_parse_widths():
    assert parse_widths('640, 750,,1080') == [640, 750, 1080]

@pytest.fixture
def fresh_root_logger(monkeypatch):
    """Root logger that setup_logging can configure; restored afterwards."""
    root = logging.getLogger()
    monkeypatch.setattr(root, 'handlers', [])
    monkeypatch.setattr(root, 'level', root.level)
    yield root
    for handler in root.handlers:
        handler.close()

def test_main_writes_log_file(clean_env, no_dotenv, fresh_root_logger, tmp_path, capsys):
    clean_env.setenv('UPLOADCARE_PUBLIC_KEY', 'test-public-key')
    log_file = tmp_path / 'loader.log'
    # basicConfig is a no-op while capture handlers are attached
    fresh_root_logger.handlers.clear()

    main(['https://example.com/image.png', '--width', '500', '--log-file', str(log_file), '-v'])

    assert any(isinstance(handler, ConcurrentRotatingFileHandler) for handler in fresh_root_logger.handlers)
    for handler in fresh_root_logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert 'Logging initialized at DEBUG level' in content
    assert 'Uploadcare Loader Configuration' in content
    assert '/-/resize/500x/' in capsys.readouterr().out

def test_main_exits_on_keyboard_interrupt(clean_env, no_dotenv, monkeypatch):
    clean_env.setenv('UPLOADCARE_PUBLIC_KEY', 'test-public-key')

    def interrupt(*args, **kwargs):
        raise KeyboardInterrupt
    monkeypatch.setattr('uploadcare_loader.main.uploadcare_loader', interrupt)

    with pytest.raises(SystemExit) as exc_info:
        main(['https://example.com/image.png'])

    assert exc_info.value.code == 1
