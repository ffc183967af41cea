from rollout.cli.app import main

main()
