from octorelease.cli.app import main

main()
