import os

# Qtのウィジェットテストを表示環境なしで実行する
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
