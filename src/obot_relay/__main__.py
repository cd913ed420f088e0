from obot_relay.app import main

main()
