from jokoui_mcp.server import main

main()
