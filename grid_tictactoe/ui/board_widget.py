from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..board import Cell

X_COLOR = QColor("#ff6b6b")
O_COLOR = QColor("#6b9bff")
EMPTY_COLOR = QColor("#555")
WIN_COLOR = QColor("#ffd700")

class BoardWidget(QWidget):
    """
    custom widget to draw and click on a square board of any size
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, session=None, parent=None):
        super().__init__(parent)
        self.session = session  # reference to game session
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_session(self, session):
        self.session = session
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), or None outside the grid
        """
        if self.session is None:
            return None
        ox, oy, side = self._geometry()
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        size = self.session.state.size
        cell = side / size
        if cell <= 0: return None
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        return max(0, min(row, size-1)), max(0, min(col, size-1))

    def paintEvent(self, event):
        """
        draw rounded cells, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), QColor("#333"))
            if self.session is None:
                return
            state = self.session.state
            ox, oy, side = self._geometry()
            size = state.size
            cell_size = side / size
            pad = cell_size * 0.05
            highlight = set(self.session.winning_line() or ())
            font = QFont("Arial", max(8, int(cell_size*0.4)), QFont.Bold)
            painter.setFont(font)
            for r in range(size):
                for c in range(size):
                    cell = state.grid[r][c]
                    rect = QRectF(ox + c*cell_size + pad, oy + r*cell_size + pad,
                                  cell_size - 2*pad, cell_size - 2*pad)
                    if cell is Cell.X: fill = X_COLOR
                    elif cell is Cell.O: fill = O_COLOR
                    else: fill = EMPTY_COLOR
                    painter.setPen(Qt.NoPen)
                    painter.setBrush(fill)
                    painter.drawRoundedRect(rect, pad*2, pad*2)
                    if (r, c) in highlight:
                        painter.setBrush(Qt.NoBrush)
                        painter.setPen(QPen(WIN_COLOR, 4))
                        painter.drawRoundedRect(rect, pad*2, pad*2)
                    if not cell.is_empty:
                        painter.setPen(QPen(Qt.white, 2))
                        painter.drawText(rect, Qt.AlignCenter, cell.value)
            # strike through the winning three
            if len(highlight) == 3:
                line = self.session.winning_line()
                (r0, c0), (r2, c2) = line[0], line[-1]
                half = cell_size/2
                pen = QPen(WIN_COLOR, 6, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin)
                painter.setPen(pen)
                painter.drawLine(QPointF(ox + c0*cell_size + half, oy + r0*cell_size + half),
                                 QPointF(ox + c2*cell_size + half, oy + r2*cell_size + half))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.session is None:
            return
        pos = event.position()
        hit = self.cell_at(pos.x(), pos.y())
        if hit is None:
            return
        self.cell_clicked.emit(*hit)  # notify main window
