from heartbeat.main import main

main()
