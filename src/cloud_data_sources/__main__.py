from cloud_data_sources.cli.main import cli_main

cli_main()
