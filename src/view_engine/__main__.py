from view_engine.adapters.terminal.app import main

if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
