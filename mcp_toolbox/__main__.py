from mcp_toolbox.main import main

main()
