import logging

from ..config import BOARD_SIZES, RESET_DELAY_MS, GameSetup, SetupError
from ..session import GameSession, INVALID
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QStackedWidget,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)

NAMES_PAGE, SIZE_PAGE, BOARD_PAGE = range(3)

class TicTacToeWindow(QMainWindow):
    """
    main window: names page, size page, then the board
    """
    def __init__(self, setup=None, reset_delay_ms=RESET_DELAY_MS):
        """
        init ui widgets, signals; jump straight to the board if setup is given
        """
        super().__init__()
        self.session = None
        self.reset_delay_ms = reset_delay_ms
        self._player1_name = ""; self._player2_name = ""
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui()
        if setup is not None:
            self.start_game(setup)
        else:
            self.pages.setCurrentIndex(NAMES_PAGE)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.pages = QStackedWidget()
        self.setCentralWidget(self.pages)

        self._create_menu_bar()            # top menu
        self.pages.addWidget(self._create_names_page())
        self.pages.addWidget(self._create_size_page())
        self.pages.addWidget(self._create_board_page())
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        reset_action = QAction("Reset Board", self)
        reset_action.triggered.connect(self.reset_game)
        new_action = QAction("New Players", self)
        new_action.triggered.connect(self._back_to_setup)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (reset_action, new_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_names_page(self):
        # two name fields + confirm
        page = QWidget(); layout = QVBoxLayout(page)
        layout.addStretch(1)
        self.player1_input = QLineEdit(); self.player1_input.setPlaceholderText("Player 1 name")
        self.player2_input = QLineEdit(); self.player2_input.setPlaceholderText("Player 2 name")
        self.confirm_names_button = QPushButton("Confirm Names")
        self.confirm_names_button.clicked.connect(self._confirm_names)
        self.player2_input.returnPressed.connect(self._confirm_names)
        self.names_message = QLabel("")
        for w in (self.player1_input, self.player2_input):
            layout.addWidget(w)
        layout.addWidget(self.confirm_names_button, alignment=Qt.AlignCenter)
        layout.addWidget(self.names_message, alignment=Qt.AlignCenter)
        layout.addStretch(1)
        return page

    def _create_size_page(self):
        # one button per board size
        page = QWidget(); layout = QVBoxLayout(page)
        layout.addStretch(1)
        title = QLabel("Select the board size:")
        f = QFont(); f.setPointSize(18); title.setFont(f)
        layout.addWidget(title, alignment=Qt.AlignCenter)
        row = QHBoxLayout()
        self.size_buttons = {}
        for n in BOARD_SIZES:
            btn = QPushButton(f"{n}x{n}")
            btn.clicked.connect(lambda checked=False, n=n: self._select_size(n))
            self.size_buttons[n] = btn
            row.addWidget(btn)
        layout.addLayout(row)
        layout.addStretch(1)
        return page

    def _create_board_page(self):
        # status label, board, reset button
        page = QWidget(); layout = QVBoxLayout(page)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(16); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        layout.addWidget(self.message_label)
        layout.addWidget(self.board_widget, 1)
        layout.addWidget(self.reset_button, alignment=Qt.AlignCenter)
        return page

    def _update_message(self, text, is_success=False):
        # set message text + style
        style = "color: lime; font-weight: bold;" if is_success else "color: #eee;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot()
    def _confirm_names(self):
        # both names must be non-blank
        p1 = self.player1_input.text().strip(); p2 = self.player2_input.text().strip()
        if not p1 or not p2:
            self.names_message.setText("Enter both player names.")
            return
        self._player1_name, self._player2_name = p1, p2
        self.names_message.setText("")
        self.pages.setCurrentIndex(SIZE_PAGE)

    def _select_size(self, size):
        try:
            setup = GameSetup.create(self._player1_name, self._player2_name, size)
        except SetupError as e:
            logger.warning("setup rejected: %s", e)
            self.names_message.setText(str(e))
            self.pages.setCurrentIndex(NAMES_PAGE)
            return
        self.start_game(setup)

    def start_game(self, setup):
        '''new session and show the board'''
        self.session = GameSession(setup)
        self.board_widget.set_session(self.session)
        self.pages.setCurrentIndex(BOARD_PAGE)
        self._refresh()

    def _refresh(self):
        # redraw board + status after any state change
        over = self.session.state.outcome.is_over
        self.board_widget.set_accept_clicks(not over)
        self.board_widget.update()
        self._update_message(self.session.status_text(), is_success=over)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # rejected moves are silent no-ops
        if self.session is None:
            return
        res = self.session.play(r, c)
        if res.status == INVALID:
            return
        self._refresh()
        if res.is_terminal:
            round_number = self.session.round_number
            QTimer.singleShot(self.reset_delay_ms,
                              lambda: self._on_reset_timer(round_number))

    def _on_reset_timer(self, round_number):
        # timer may outlive the round it was scheduled for
        if self.session is not None and self.session.start_next_round(round_number):
            self._refresh()

    @Slot()
    def reset_game(self):
        # fresh board, player 1 opens
        if self.session is None:
            return
        self.session.reset()
        self._refresh()

    @Slot()
    def _back_to_setup(self):
        # drop the session and ask for names again
        self.session = None
        self.board_widget.set_session(None)
        self.player1_input.clear(); self.player2_input.clear()
        self.pages.setCurrentIndex(NAMES_PAGE)
