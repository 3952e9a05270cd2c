from __future__ import annotations

from unittest.mock import Mock, patch

from restaurant_viewer.services.progress import RowProgress, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestRowProgress:
    """Test cases for RowProgress."""

    def test_init_with_tty_enabled(self):
        with patch('restaurant_viewer.services.progress.is_tty_enabled', return_value=True), \
             patch('restaurant_viewer.services.progress.tqdm') as mock_tqdm:

            progress = RowProgress(120, description="Rows")

            assert progress.total_rows == 120
            assert progress.enabled is True
            mock_tqdm.assert_called_once_with(
                total=120,
                desc="Rows",
                unit="row",
                disable=False,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch('restaurant_viewer.services.progress.is_tty_enabled', return_value=False):
            progress = RowProgress(5)
            assert progress.enabled is False
            assert progress.pbar is None

    def test_caller_switch_disables_bar(self):
        with patch('restaurant_viewer.services.progress.is_tty_enabled', return_value=True), \
             patch('restaurant_viewer.services.progress.tqdm') as mock_tqdm:
            progress = RowProgress(5, enabled=False)
            assert progress.enabled is False
            mock_tqdm.assert_not_called()

    def test_advance_updates_bar(self):
        mock_pbar = Mock()
        with patch('restaurant_viewer.services.progress.is_tty_enabled', return_value=True), \
             patch('restaurant_viewer.services.progress.tqdm', return_value=mock_pbar):
            progress = RowProgress(3)
            progress.advance()
            progress.advance(2)
            assert progress.current_row == 3
            assert mock_pbar.update.call_count == 2

    def test_advance_without_tty_counts_only(self):
        with patch('restaurant_viewer.services.progress.is_tty_enabled', return_value=False):
            progress = RowProgress(3)
            progress.advance()
            assert progress.current_row == 1

    def test_context_manager_closes(self):
        mock_pbar = Mock()
        with patch('restaurant_viewer.services.progress.is_tty_enabled', return_value=True), \
             patch('restaurant_viewer.services.progress.tqdm', return_value=mock_pbar):
            with RowProgress(1) as progress:
                progress.set_postfix(geocoded=1)
            mock_pbar.set_postfix.assert_called_once_with(geocoded=1)
            mock_pbar.close.assert_called_once()
            assert progress.pbar is None
